# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Fixed-format text templates for custom blocks, components and pages.

Output is a starting point with TODO markers; nothing here inspects
page content.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

from .errors import InvalidInputError, InvalidNameError

_WHITESPACE_RE = re.compile(r"\s+")

COMPONENT_KINDS = ("functional", "class")


@dataclass(frozen=True, slots=True)
class BlockFiles:
    js: str
    css: str
    class_name: str


def to_class_name(name: str) -> str:
    """Lowercase *name* and collapse whitespace runs to ``-``.

    The result is used as a file and directory name, so path separators
    and the ``.``/``..`` names are rejected.
    """
    if not name or not name.strip():
        raise InvalidNameError("Name is required.")
    class_name = _WHITESPACE_RE.sub("-", name.strip().lower())
    if "/" in class_name or "\\" in class_name or class_name in (".", ".."):
        raise InvalidNameError(f"Invalid name '{name.strip()}': path separators are not allowed.")
    return class_name


def block_template(
    name: str,
    *,
    has_buttons: bool = False,
    lazy_load: bool = False,
    responsive: bool = True,
) -> BlockFiles:
    """Generic block skeleton: container, row and cell styling."""
    class_name = to_class_name(name)
    label = name.strip()

    buttons_js = ""
    if has_buttons:
        buttons_js = """
  // Add button functionality
  const buttons = block.querySelectorAll('a.button');
  buttons.forEach((button) => {
    button.addEventListener('click', () => {
      // TODO: handle button click
    });
  });
"""

    lazy_js = ""
    if lazy_load:
        lazy_js = """
  // Lazy-load content when the block scrolls into view
  const observer = new IntersectionObserver((entries) => {
    entries.forEach((entry) => {
      if (entry.isIntersecting) {
        // TODO: load content
        observer.unobserve(entry.target);
      }
    });
  });
  observer.observe(block);
"""

    js = f"""export default function decorate(block) {{
  // TODO: Implement {label} block decoration logic
  const rows = [...block.children];

  rows.forEach((row) => {{
    const cells = [...row.children];
    cells.forEach((cell) => {{
      cell.classList.add('{class_name}-cell');
    }});
  }});
{buttons_js}{lazy_js}}}
"""

    css = f""".{class_name} {{
  /* Container styles */
  display: block;
  padding: 20px;
  margin: 0 auto;
  max-width: 1200px;
}}

.{class_name} > div {{
  /* Row styles */
  display: flex;
  gap: 16px;
  margin-bottom: 16px;
}}

.{class_name} > div > div {{
  /* Cell styles */
  flex: 1;
}}
"""
    if has_buttons:
        css += f"""
.{class_name} a.button {{
  display: inline-block;
  padding: 10px 20px;
  background-color: #0066cc;
  color: #ffffff;
  text-decoration: none;
  border-radius: 4px;
  transition: background-color 0.3s;
}}

.{class_name} a.button:hover {{
  background-color: #6c757d;
}}
"""
    if responsive:
        css += f"""
@media (max-width: 768px) {{
  .{class_name} > div {{
    flex-direction: column;
  }}
}}
"""
    return BlockFiles(js=js, css=css, class_name=class_name)


def component_template(name: str, kind: str = "functional") -> str:
    """Plain JS component module, either a factory function or a class."""
    if not name or not name.strip():
        raise InvalidNameError("Component name is required.")
    if kind not in COMPONENT_KINDS:
        raise InvalidInputError(f"Unknown component type '{kind}'. Use one of: {', '.join(COMPONENT_KINDS)}.")
    class_name = to_class_name(name)
    stripped = name.strip()
    component_name = stripped[0].upper() + stripped[1:]

    if kind == "class":
        return f"""export default class {component_name} {{
  constructor(element) {{
    this.element = element;
    this.init();
  }}

  init() {{
    // TODO: initialize component
  }}

  render() {{
    // TODO: render component
  }}

  destroy() {{
    // TODO: cleanup
  }}
}}
"""

    return f"""export default function {component_name}(element, options = {{}}) {{
  const defaults = {{
    // TODO: default options
  }};

  const config = {{ ...defaults, ...options }};

  function init() {{
    element.dataset.component = '{class_name}';
  }}

  function render() {{
    // TODO: render logic
  }}

  return {{
    init,
    render,
    element,
    config,
  }};
}}
"""


def page_template(name: str) -> str:
    """HTML5 page wired to the project's global styles and block loader."""
    template_class = to_class_name(name)
    title = html.escape(name.strip())
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <link rel="stylesheet" href="/styles/styles.css">
  <script type="module" src="/scripts/scripts.js"></script>
</head>
<body>
  <header></header>
  <main>
    <div class="{template_class}">
      <!-- Template content -->
    </div>
  </main>
  <footer></footer>
</body>
</html>
"""
