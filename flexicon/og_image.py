"""
OG image generator.

Renders the static terminal card in headless Chromium and saves a PNG
screenshot for social previews.

Run:  og-image   (or  python -m flexicon.og_image)
Writes <project root>/static/og-image.png at 2400x1260 (1200x630 @2x).
"""

import asyncio
import os
import sys
from pathlib import Path

from playwright.async_api import async_playwright
from pydantic import BaseModel, ConfigDict

from flexicon.config import PROJECT_ROOT, get_settings
from flexicon.image_utils import describe_image
from flexicon.og_template import HTML_TEMPLATE


class Viewport(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = 1200
    height: int = 630
    device_scale_factor: int = 2

    @property
    def pixel_size(self) -> tuple[int, int]:
        return (self.width * self.device_scale_factor,
                self.height * self.device_scale_factor)


class RenderJob(BaseModel):
    model_config = ConfigDict(frozen=True)

    html: str
    viewport: Viewport = Viewport()
    output_path: Path


def default_output_path() -> Path:
    return Path(PROJECT_ROOT) / "static" / "og-image.png"


def default_job(settings=None) -> RenderJob:
    settings = settings or get_settings()
    return RenderJob(
        html=HTML_TEMPLATE,
        viewport=Viewport(
            width=settings.og_viewport_width,
            height=settings.og_viewport_height,
            device_scale_factor=settings.og_device_scale_factor,
        ),
        output_path=Path(settings.og_output_path) if settings.og_output_path else default_output_path(),
    )


async def render_og_image(job: RenderJob, browser_args=None, playwright_factory=None) -> Path:
    """
    Render `job` to a PNG. Raises on any failure; the browser is closed
    before the exception leaves this function.
    """
    if browser_args is None:
        browser_args = get_settings().browser_args
    playwright_factory = playwright_factory or async_playwright

    print("🚀 Launching browser...")
    async with playwright_factory() as p:
        browser = await p.chromium.launch(headless=True, args=list(browser_args))
        try:
            page = await browser.new_page(
                viewport={"width": job.viewport.width, "height": job.viewport.height},
                device_scale_factor=job.viewport.device_scale_factor,
            )

            print("📄 Loading HTML template...")
            # Template is self-contained, so network idle == fully settled
            await page.set_content(job.html, wait_until="networkidle")

            os.makedirs(job.output_path.parent, exist_ok=True)

            print("📸 Taking screenshot...")
            await page.screenshot(
                path=str(job.output_path),
                type="png",
                omit_background=False,
            )
        finally:
            await browser.close()

    return job.output_path


async def generate_og_image(job: RenderJob | None = None, browser_args=None,
                            playwright_factory=None) -> int:
    """Render and report. Returns the process exit code (0 ok, 1 failed)."""
    job = job or default_job()
    try:
        output_path = await render_og_image(
            job, browser_args=browser_args, playwright_factory=playwright_factory,
        )
        info = describe_image(output_path)
        print(f"✅ OG image generated successfully: {info['path']}")
        print(f"📦 File size: {info['size']}")
        print(f"🖼️  Dimensions: {info['width']}x{info['height']}")
    except Exception as e:
        print(f"❌ Error generating OG image: {e}", file=sys.stderr)
        return 1
    return 0


def main():
    try:
        code = asyncio.run(generate_og_image())
    except Exception as e:
        print(f"❌ Fatal error: {e}", file=sys.stderr)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
