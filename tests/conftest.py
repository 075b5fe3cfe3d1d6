import pytest
from PIL import Image

from flexicon.config import Settings


class FakeSurface:
    """Records every text the typewriter writes."""

    def __init__(self):
        self.frames = []
        self.cleared = 0

    async def clear(self):
        self.cleared += 1

    async def set_text(self, text):
        self.frames.append(text)


class FakePage:
    def __init__(self, viewport, device_scale_factor, fail_on=None):
        self.viewport = viewport
        self.device_scale_factor = device_scale_factor
        self.fail_on = fail_on
        self.content = None
        self.wait_until = None

    async def set_content(self, html, wait_until=None):
        if self.fail_on == "set_content":
            raise RuntimeError("set_content blew up")
        self.content = html
        self.wait_until = wait_until

    async def screenshot(self, path=None, type=None, omit_background=None):
        if self.fail_on == "screenshot":
            raise RuntimeError("screenshot blew up")
        size = (
            self.viewport["width"] * self.device_scale_factor,
            self.viewport["height"] * self.device_scale_factor,
        )
        Image.new("RGB", size, (15, 23, 42)).save(path, "PNG")


class FakeBrowser:
    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.close_calls = 0
        self.pages = []

    async def new_page(self, viewport=None, device_scale_factor=1):
        page = FakePage(viewport, device_scale_factor, fail_on=self.fail_on)
        self.pages.append(page)
        return page

    async def close(self):
        self.close_calls += 1


class FakeChromium:
    def __init__(self, browser, fail_launch=False):
        self.browser = browser
        self.fail_launch = fail_launch
        self.launch_kwargs = None

    async def launch(self, **kwargs):
        self.launch_kwargs = kwargs
        if self.fail_launch:
            raise RuntimeError("no chromium here")
        return self.browser


class FakePlaywright:
    """Stands in for async_playwright(): an async context manager."""

    def __init__(self, fail_on=None, fail_launch=False):
        self.browser = FakeBrowser(fail_on=fail_on)
        self.chromium = FakeChromium(self.browser, fail_launch=fail_launch)
        self.exited = 0

    def __call__(self):
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.exited += 1
        return False


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def fake_sleep(sleeps):
    async def _sleep(seconds):
        sleeps.append(seconds)
    return _sleep


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def fake_playwright():
    return FakePlaywright()
