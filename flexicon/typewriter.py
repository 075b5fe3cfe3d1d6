"""
Typewriter animation for the site logo.

The logo element carries a comma-separated list of code snippets in its
`data-values` attribute. On page load the list is shuffled once, then each
snippet is typed out, held for a moment and deleted again, forever.

The animation is modelled as a lazy sequence of step descriptors
(TypeStep / DeleteStep) that a Typewriter executes one at a time against a
display surface. In a live page the surface is the logo element itself,
driven through Playwright.
"""

import asyncio
import itertools
from dataclasses import dataclass
from typing import Iterator, Union

from flexicon.config import get_settings
from flexicon.shuffle import shuffle


class ElementNotFoundError(LookupError):
    """The typewriter target element is missing from the page."""


@dataclass(frozen=True)
class TypeStep:
    text: str
    delay: int  # ms to pause once the text is typed


@dataclass(frozen=True)
class DeleteStep:
    count: int
    delay: int  # ms to pause once the characters are gone


Step = Union[TypeStep, DeleteStep]


def parse_snippets(values: str | None) -> list[str]:
    """Split the `data-values` attribute into snippets (no trimming)."""
    if values is None:
        raise ValueError("Typewriter element has no data-values attribute")
    return values.split(",")


def build_steps(snippets: list[str], type_delay: int = 3000,
                delete_delay: int = 200) -> list[Step]:
    """One type + delete pair per snippet, in the given order."""
    steps: list[Step] = []
    for s in snippets:
        steps.append(TypeStep(s, type_delay))
        steps.append(DeleteStep(len(s), delete_delay))
    return steps


def iter_steps(snippets: list[str], loop: bool = True, type_delay: int = 3000,
               delete_delay: int = 200) -> Iterator[Step]:
    """
    Lazy step sequence. With loop=True the same order repeats forever;
    take a bounded prefix with itertools.islice.
    """
    steps = build_steps(snippets, type_delay=type_delay, delete_delay=delete_delay)
    if not steps:
        return iter(())
    return itertools.cycle(steps) if loop else iter(steps)


class ElementSurface:
    """Display surface backed by a Playwright ElementHandle."""

    def __init__(self, element):
        self.element = element

    async def clear(self):
        await self.element.evaluate("el => { el.innerHTML = ''; }")

    async def set_text(self, text: str):
        await self.element.evaluate("(el, text) => { el.textContent = text; }", text)


class Typewriter:
    """
    Executes type/delete steps strictly in order against a surface.

    `speed` is the per-keystroke delay in ms when typing; deletions run at
    `delete_speed`, which defaults to a third of `speed`. No cursor is drawn.
    """

    def __init__(self, surface, snippets: list[str], speed: int = 75,
                 type_delay: int = 3000, delete_delay: int = 200,
                 loop: bool = True, delete_speed: int | None = None,
                 sleep=asyncio.sleep):
        self.surface = surface
        self.snippets = list(snippets)
        self.speed = speed
        self.delete_speed = delete_speed if delete_speed is not None else speed / 3
        self.type_delay = type_delay
        self.delete_delay = delete_delay
        self.loop = loop
        self.text = ""
        self._sleep = sleep

    def steps(self) -> Iterator[Step]:
        return iter_steps(self.snippets, loop=self.loop,
                          type_delay=self.type_delay, delete_delay=self.delete_delay)

    async def go(self, limit: int | None = None):
        """Run the animation. `limit` caps the number of steps; None runs forever."""
        steps = self.steps()
        if limit is not None:
            steps = itertools.islice(steps, limit)

        for step in steps:
            if isinstance(step, TypeStep):
                await self._type(step.text)
            else:
                await self._delete(step.count)
            await self._sleep(step.delay / 1000)

    async def _type(self, text: str):
        for ch in text:
            self.text += ch
            await self.surface.set_text(self.text)
            await self._sleep(self.speed / 1000)

    async def _delete(self, count: int):
        for _ in range(min(count, len(self.text))):
            self.text = self.text[:-1]
            await self.surface.set_text(self.text)
            await self._sleep(self.delete_speed / 1000)


async def start_typewriter(page, settings=None, rng=None) -> Typewriter:
    """
    Page-load entry point: wire the logo element up for typing.

    Fails fast with ElementNotFoundError when the element is missing.
    Returns the Typewriter without starting it; call `await tw.go()`.
    """
    settings = settings or get_settings()
    selector = f"#{settings.typewriter_element_id}"

    element = await page.query_selector(selector)
    if element is None:
        raise ElementNotFoundError(f"No element matches {selector}")

    snippets = shuffle(parse_snippets(await element.get_attribute("data-values")), rng)

    # Drop the static fallback text shown when JS is disabled
    surface = ElementSurface(element)
    await surface.clear()

    print(f"[typewriter] {len(snippets)} snippets queued on {selector}")
    return Typewriter(
        surface,
        snippets,
        speed=settings.typewriter_speed,
        type_delay=settings.typewriter_type_delay,
        delete_delay=settings.typewriter_delete_delay,
        loop=True,
    )


PREVIEW_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Typewriter preview</title>
  <style>
    body {
      display: flex;
      align-items: center;
      justify-content: center;
      height: 100vh;
      margin: 0;
      background: #0f172a;
      color: #22d3ee;
      font-family: 'Courier New', monospace;
      font-size: 32px;
    }
  </style>
</head>
<body>
  <a href="/" id="logo-text"
     data-values="console.log('hi'),print('hi'),echo hi,puts 'hi',fmt.Println(&quot;hi&quot;)">hello world</a>
</body>
</html>
"""


async def run_preview():
    from playwright.async_api import async_playwright

    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=False)
        try:
            page = await browser.new_page(viewport={"width": 800, "height": 400})
            await page.set_content(PREVIEW_HTML)
            typewriter = await start_typewriter(page)
            print("[typewriter] Running, press Ctrl+C to stop")
            await typewriter.go()
        finally:
            await browser.close()


def preview():
    """Open a visible browser window and run the logo animation."""
    try:
        asyncio.run(run_preview())
    except KeyboardInterrupt:
        print("\n[typewriter] Stopped")


if __name__ == "__main__":
    preview()
