class FakeResponse:
    def __init__(self, text, status=200):
        self._text = text
        self.status = status

    async def text(self):
        if isinstance(self._text, bytes):
            # aiohttp decodes strictly with the response charset.
            return self._text.decode("utf-8")
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass


class FakeSession:
    """Stand-in for aiohttp.ClientSession recording every post()."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.requests = []

    def post(self, url, **kwargs):
        self.requests.append((url, kwargs))
        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        if isinstance(response, FakeResponse):
            return response
        return FakeResponse(response)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass


def yamaha_response(body, rsp="GET", rc="0"):
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        f'<YAMAHA_AV rsp="{rsp}" RC="{rc}"><Main_Zone>{body}</Main_Zone></YAMAHA_AV>'
    )
