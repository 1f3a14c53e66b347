"""Job driver: runs one filtering pass per target page, strictly in sequence."""

import os
import sys
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TextIO, Tuple

import csscompressor
import orjson
from tqdm import tqdm

from .core import FilterStats, RuleWalker, finalize, preformat
from .managers import BrowserRenderManager, MemoryManager
from .utils.config import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, OUTPUT_FILE_TEMPLATE, RENDER_WAIT_TIME, VERSION
)
from .utils.error import ConfigurationError
from .utils.file import safe_read_file, safe_write_file

logger = logging.getLogger(__name__)

@dataclass
class CriticalCSSJob:
    """Options for one run over a stylesheet and its target pages."""
    css_file: str
    urls: List[str] = field(default_factory=list)
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    minify: bool = False
    output_dir: str = '.'
    report_file: Optional[str] = None
    render_wait: float = RENDER_WAIT_TIME
    memory_limit: Optional[int] = None

    def output_target(self, index: int) -> Optional[str]:
        """Where the result for the url at index goes, None meaning stdout."""
        if len(self.urls) == 1:
            return None
        return os.path.join(self.output_dir, OUTPUT_FILE_TEMPLATE.format(index=index + 1))

async def run_pass(css: str, url: str, render) -> Tuple[str, FilterStats]:
    """Load one page and filter a preformatted stylesheet against it.

    Args:
        css: Preformatted stylesheet text
        url: Page to load
        render: Render manager used to load and query the page

    Returns:
        Critical path CSS and the pass statistics

    Raises:
        RenderUnavailableError: If the page can't be loaded or queried
    """
    await render.open(url)
    walker = RuleWalker(render, render.viewport_height)
    critical_css = finalize(await walker.walk(css))
    return critical_css, walker.stats

async def generate(job: CriticalCSSJob,
                   render_factory: Callable[..., Any] = BrowserRenderManager,
                   stdout: Optional[TextIO] = None) -> Dict[str, Any]:
    """Generate critical path CSS for every url of a job.

    Passes run one after another; the first failure aborts the rest.

    Args:
        job: Job options
        render_factory: Builds the render manager from width, height and render_wait
        stdout: Stream used when the job has a single url

    Returns:
        Report with per url statistics

    Raises:
        CriticalCSSError: If reading, rendering or writing fails
    """
    if not job.urls:
        raise ConfigurationError("At least one url is required")

    css = preformat(await safe_read_file(job.css_file))
    memory_manager = MemoryManager(job.memory_limit)
    stdout = stdout or sys.stdout

    report: Dict[str, Any] = {
        'version': VERSION,
        'css_file': job.css_file,
        'viewport': {'width': job.width, 'height': job.height},
        'passes': []
    }

    async with render_factory(width=job.width, height=job.height,
                              render_wait=job.render_wait) as render:
        urls = tqdm(job.urls, unit='url', file=sys.stderr, disable=len(job.urls) == 1)
        for index, url in enumerate(urls):
            memory_manager.ensure_available()
            logger.info(f"Generating critical css for {url}")

            critical_css, stats = await run_pass(css, url, render)
            if job.minify:
                critical_css = csscompressor.compress(critical_css)

            target = job.output_target(index)
            if target is None:
                stdout.write(critical_css + '\n')
                stdout.flush()
            else:
                await safe_write_file(target, critical_css)
                logger.info(f"Critical css for {url} saved to {target}")

            report['passes'].append({
                'url': url,
                'output': target,
                'css_size': len(critical_css),
                'stats': stats.as_dict()
            })

        report['render'] = render.get_stats()

    report['memory'] = memory_manager.get_stats()
    if job.report_file:
        await safe_write_file(
            job.report_file, orjson.dumps(report, option=orjson.OPT_INDENT_2).decode()
        )
    return report

__all__ = ['CriticalCSSJob', 'run_pass', 'generate']
