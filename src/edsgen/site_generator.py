# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Write a complete EDS project skeleton from a crawl result.

Layout::

    <domain>/
    ├── blocks/<type>/<type>.{js,css}
    ├── templates/home.html
    ├── pages/
    ├── scripts/scripts.js
    ├── styles/styles.css
    └── README.md
"""

from __future__ import annotations

import html
import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from . import GeneratedFile, PageAnalysis
from .emitter import emit_analysis
from .errors import EdsGenError, InvalidNameError
from .site_scraper import CrawlResult
from .templates import to_class_name

logger = logging.getLogger(__name__)

SITE_DIRS = ("blocks", "templates", "pages", "scripts", "styles")
PROJECT_DIRS = ("blocks", "components", "templates", "scripts", "styles", "icons", "test")


@dataclass(frozen=True, slots=True)
class GeneratedBlock:
    name: str
    description: str
    confidence: str
    files: tuple[str, ...]  # paths relative to the site root


@dataclass(frozen=True, slots=True)
class GeneratedSite:
    site_name: str
    path: Path
    blocks: tuple[GeneratedBlock, ...] = ()
    templates: tuple[str, ...] = ()
    files: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def write_block(files: Iterable[GeneratedFile], directory: Path) -> list[Path]:
    """Write emitted block files into *directory* (created if missing)."""
    directory.mkdir(parents=True, exist_ok=True)
    written = []
    for f in files:
        path = directory / f.file_name
        path.write_text(f.content, encoding="utf-8")
        written.append(path)
    return written


def _create_dirs(root: Path, names: Iterable[str]) -> None:
    for name in names:
        (root / name).mkdir(parents=True, exist_ok=True)


def render_home_template(analysis: PageAnalysis, fallback_title: str = "home") -> str:
    """Page template with one block section per detected component."""
    title = html.escape(analysis.title or fallback_title)
    sections = "\n".join(
        f"""
    <!-- {html.escape(c.name)} -->
    <div class="section">
      <div class="{c.block_id} block">
        <!-- {c.block_id} content -->
      </div>
    </div>"""
        for c in analysis.detected_components
        if c.type not in ("header", "navigation", "footer")
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <link rel="stylesheet" href="../styles/styles.css">
  <script type="module" src="../scripts/scripts.js"></script>
</head>
<body>
  <header>
    <div class="navigation block">
      <!-- Navigation content here -->
    </div>
  </header>

  <main>{sections}
  </main>

  <footer>
    <div class="footer block">
      <!-- Footer content here -->
    </div>
  </footer>
</body>
</html>
"""


def render_styles(analysis: PageAnalysis) -> str:
    """Global stylesheet exposing the detected palette and typography as CSS variables."""
    colors = analysis.color_guess
    typo = analysis.typography_guess
    return f"""/* Site styles generated from {analysis.source_url or "local HTML"} */

:root {{
  --primary-color: {colors.primary};
  --secondary-color: {colors.secondary};
  --background-color: {colors.background};
  --text-color: {colors.text};

  --font-family: {typo.font_family};
  --base-font-size: {typo.base_font_size};
  --line-height: {typo.line_height};
}}

* {{
  box-sizing: border-box;
  margin: 0;
  padding: 0;
}}

body {{
  font-family: var(--font-family);
  font-size: var(--base-font-size);
  line-height: var(--line-height);
  color: var(--text-color);
  background-color: var(--background-color);
}}

main {{
  min-height: 100vh;
}}

.section {{
  padding: 40px 20px;
  max-width: 1200px;
  margin: 0 auto;
}}

.block {{
  margin: 20px 0;
}}

a {{
  color: var(--primary-color);
  text-decoration: none;
}}

img {{
  max-width: 100%;
  height: auto;
}}

.button,
a.button {{
  display: inline-block;
  padding: 12px 24px;
  background-color: var(--primary-color);
  color: var(--background-color);
  border: none;
  border-radius: 4px;
  cursor: pointer;
}}

.button:hover,
a.button:hover {{
  background-color: var(--secondary-color);
}}

@media (max-width: 768px) {{
  .section {{
    padding: 20px 10px;
  }}
}}
"""


BLOCK_LOADER_JS = """/**
 * Block loader: imports blocks/<name>/<name>.js for every .block element
 * and calls its default export with the element.
 */

const blockModules = new Map();

async function loadBlockModule(blockName) {
  if (blockModules.has(blockName)) {
    return blockModules.get(blockName);
  }
  try {
    const module = await import(`../blocks/${blockName}/${blockName}.js`);
    blockModules.set(blockName, module.default);
    return module.default;
  } catch (error) {
    console.error(`Failed to load block module: ${blockName}`, error);
    return null;
  }
}

async function decorateBlock(block) {
  const blockName = [...block.classList].find((c) => c !== 'block');
  if (!blockName) return;

  block.dataset.blockStatus = 'loading';
  try {
    const decorate = await loadBlockModule(blockName);
    if (decorate) {
      await decorate(block);
      block.dataset.blockStatus = 'loaded';
    } else {
      block.dataset.blockStatus = 'error';
    }
  } catch (error) {
    console.error(`Error decorating block: ${blockName}`, error);
    block.dataset.blockStatus = 'error';
  }
}

async function loadBlocks() {
  const blocks = document.querySelectorAll('.block');
  await Promise.all([...blocks].map((block) => decorateBlock(block)));
}

if (document.readyState === 'loading') {
  document.addEventListener('DOMContentLoaded', loadBlocks);
} else {
  loadBlocks();
}
"""


def render_readme(site_name: str, url: str, analysis: PageAnalysis, blocks: Iterable[GeneratedBlock]) -> str:
    blocks = list(blocks)
    colors = analysis.color_guess
    typo = analysis.typography_guess

    if blocks:
        block_lines = "\n".join(
            f"- **{b.name}** ({b.confidence} confidence): {b.description}\n"
            f"  - Files: {', '.join(f'`{f}`' for f in b.files)}"
            for b in blocks
        )
    else:
        block_lines = "- No components detected"
    patterns = "\n".join(f"- {p}" for p in analysis.layout_patterns) or "- No specific patterns detected"

    return f"""# {site_name}

Generated from: [{url}]({url})
Generated on: {date.today().isoformat()}

## Structure

```
{site_name}/
├── blocks/      # One folder per block
├── templates/   # Page templates
├── pages/       # Page content
├── scripts/     # Block loader
├── styles/      # Global styles
└── README.md
```

## Blocks

{block_lines}

## Layout Patterns

{patterns}

## Color Scheme

- **Primary:** {colors.primary}
- **Secondary:** {colors.secondary}
- **Background:** {colors.background}
- **Text:** {colors.text}

## Typography

- **Font Family:** {typo.font_family}
- **Base Font Size:** {typo.base_font_size}
- **Line Height:** {typo.line_height}

## Usage

```html
<div class="block-name block">
  <!-- Block content -->
</div>
```

Blocks are loaded and decorated by `scripts/scripts.js`.
"""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_site(crawl_result: CrawlResult, base_path: Path | str) -> GeneratedSite:
    """Materialise a project for a successful crawl under ``base_path/<domain>``."""
    if not crawl_result.success or crawl_result.analysis is None:
        raise EdsGenError(f"Cannot generate site: {crawl_result.error or 'crawl failed'}")

    analysis = crawl_result.analysis
    site_name = crawl_result.domain_name or "site"
    root = Path(base_path) / site_name
    logger.info("Generating site %s in %s", site_name, root)
    _create_dirs(root, SITE_DIRS)

    names = {c.block_id: c for c in analysis.detected_components}
    blocks: list[GeneratedBlock] = []
    written: list[Path] = []
    for block_id, files in emit_analysis(analysis).items():
        paths = write_block(files, root / "blocks" / block_id)
        written.extend(paths)
        component = names[block_id]
        blocks.append(
            GeneratedBlock(
                name=block_id,
                description=component.name,
                confidence=str(component.confidence),
                files=tuple(p.relative_to(root).as_posix() for p in paths),
            )
        )
        logger.debug("Wrote block %s", block_id)

    home = root / "templates" / "home.html"
    home.write_text(render_home_template(analysis), encoding="utf-8")
    styles = root / "styles" / "styles.css"
    styles.write_text(render_styles(analysis), encoding="utf-8")
    scripts = root / "scripts" / "scripts.js"
    scripts.write_text(BLOCK_LOADER_JS, encoding="utf-8")
    readme = root / "README.md"
    readme.write_text(render_readme(site_name, crawl_result.url, analysis, blocks), encoding="utf-8")
    written += [home, styles, scripts, readme]

    logger.info("Generated %d block(s) for %s", len(blocks), site_name)
    return GeneratedSite(
        site_name=site_name,
        path=root,
        blocks=tuple(blocks),
        templates=("home.html",),
        files=tuple(p.relative_to(root).as_posix() for p in written),
    )


def init_project(name: str, base_path: Path | str) -> Path:
    """Create an empty EDS project: directories, loader, base styles, package.json."""
    if not name or not name.strip():
        raise InvalidNameError("Project name is required.")
    project_name = to_class_name(name)
    root = Path(base_path) / project_name
    _create_dirs(root, PROJECT_DIRS)

    (root / "scripts" / "scripts.js").write_text(BLOCK_LOADER_JS, encoding="utf-8")
    (root / "styles" / "styles.css").write_text(render_styles(PageAnalysis(source_url="")), encoding="utf-8")
    package = {
        "name": project_name,
        "version": "1.0.0",
        "description": "AEM Edge Delivery Services Project",
        "type": "module",
        "scripts": {
            "test": 'echo "No tests specified"',
            "lint": "eslint .",
            "dev": 'echo "Start your local development server"',
        },
        "keywords": ["aem", "eds", "edge-delivery"],
        "author": "",
        "license": "MIT",
    }
    (root / "package.json").write_text(json.dumps(package, indent=2) + "\n", encoding="utf-8")
    logger.info("Initialized project %s at %s", project_name, root)
    return root
