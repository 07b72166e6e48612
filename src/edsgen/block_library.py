# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Library of ready-made EDS blocks, keyed by component type.

Each entry is a closed-form JS decorator plus CSS.  Colors in the CSS use
the default palette literals (#0066cc, #6c757d, #ffffff, #333333) so the
emitter can swap in a page's detected colors.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidInputError


@dataclass(frozen=True, slots=True)
class BlockDefinition:
    name: str
    category: str
    description: str
    js: str
    css: str


# ---------------------------------------------------------------------------
# Template blocks (page chrome)
# ---------------------------------------------------------------------------

_HEADER_JS = """export default function decorate(block) {
  const rows = [...block.children];
  const [brandRow, ...toolRows] = rows;

  if (brandRow) {
    brandRow.classList.add('header-brand');
    const logo = brandRow.querySelector('img, picture');
    if (logo) logo.closest('div').classList.add('header-logo');
  }

  toolRows.forEach((row) => row.classList.add('header-tools'));

  const onScroll = () => {
    block.classList.toggle('header-scrolled', window.scrollY > 0);
  };
  window.addEventListener('scroll', onScroll, { passive: true });
  onScroll();
}
"""

_HEADER_CSS = """.header {
  position: sticky;
  top: 0;
  z-index: 100;
  display: flex;
  align-items: center;
  justify-content: space-between;
  padding: 16px 20px;
  background: #ffffff;
  color: #333333;
  transition: box-shadow 0.3s;
}

.header.header-scrolled {
  box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
}

.header .header-logo img {
  max-height: 48px;
  width: auto;
}

.header .header-tools {
  display: flex;
  gap: 16px;
}

.header a {
  color: #0066cc;
}
"""

_NAVIGATION_JS = """export default function decorate(block) {
  const list = block.querySelector('ul');
  if (!list) return;

  const nav = document.createElement('nav');
  nav.setAttribute('aria-label', 'Main navigation');
  nav.append(list);

  list.querySelectorAll(':scope > li').forEach((item) => {
    const submenu = item.querySelector('ul');
    if (!submenu) return;
    item.classList.add('nav-has-dropdown');
    const trigger = item.querySelector('a');
    if (trigger) trigger.setAttribute('aria-expanded', 'false');
    item.addEventListener('mouseenter', () => {
      item.classList.add('nav-open');
      if (trigger) trigger.setAttribute('aria-expanded', 'true');
    });
    item.addEventListener('mouseleave', () => {
      item.classList.remove('nav-open');
      if (trigger) trigger.setAttribute('aria-expanded', 'false');
    });
  });

  const toggle = document.createElement('button');
  toggle.className = 'nav-toggle';
  toggle.setAttribute('aria-label', 'Toggle navigation');
  toggle.setAttribute('aria-expanded', 'false');
  toggle.innerHTML = '<span></span><span></span><span></span>';
  toggle.addEventListener('click', () => {
    const open = nav.classList.toggle('nav-mobile-open');
    toggle.setAttribute('aria-expanded', String(open));
  });

  block.textContent = '';
  block.append(toggle, nav);
}
"""

_NAVIGATION_CSS = """.navigation {
  position: relative;
}

.navigation ul {
  margin: 0;
  padding: 0;
  list-style: none;
  display: flex;
  gap: 20px;
}

.navigation a {
  display: block;
  padding: 10px 15px;
  color: #333333;
  text-decoration: none;
}

.navigation a:hover {
  color: #0066cc;
}

.navigation .nav-has-dropdown {
  position: relative;
}

.navigation .nav-has-dropdown ul {
  display: none;
  position: absolute;
  top: 100%;
  left: 0;
  flex-direction: column;
  gap: 0;
  background: #ffffff;
  box-shadow: 0 4px 12px rgba(0, 0, 0, 0.1);
}

.navigation .nav-open ul {
  display: flex;
}

.navigation .nav-toggle {
  display: none;
  background: none;
  border: none;
  cursor: pointer;
  padding: 10px;
}

.navigation .nav-toggle span {
  display: block;
  width: 25px;
  height: 3px;
  margin: 5px 0;
  background: #333333;
}

@media (max-width: 768px) {
  .navigation .nav-toggle {
    display: block;
  }

  .navigation nav {
    display: none;
  }

  .navigation nav.nav-mobile-open {
    display: block;
  }

  .navigation ul {
    flex-direction: column;
  }
}
"""

_FOOTER_JS = """export default function decorate(block) {
  const rows = [...block.children];
  rows.forEach((row, index) => {
    row.classList.add(index === rows.length - 1 ? 'footer-legal' : 'footer-links');
  });

  const legal = block.querySelector('.footer-legal');
  if (legal && !legal.textContent.includes('\\u00a9')) {
    const copy = document.createElement('p');
    copy.textContent = `\\u00a9 ${new Date().getFullYear()}`;
    legal.append(copy);
  }
}
"""

_FOOTER_CSS = """.footer {
  padding: 40px 20px;
  background: #333333;
  color: #ffffff;
}

.footer .footer-links {
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(180px, 1fr));
  gap: 24px;
  margin-bottom: 24px;
}

.footer a {
  color: #ffffff;
  text-decoration: none;
}

.footer a:hover {
  color: #0066cc;
}

.footer .footer-legal {
  border-top: 1px solid #6c757d;
  padding-top: 16px;
  font-size: 14px;
  color: #6c757d;
}
"""

_BREADCRUMB_JS = """export default function decorate(block) {
  const nav = document.createElement('nav');
  nav.setAttribute('aria-label', 'Breadcrumb');
  const list = document.createElement('ol');

  const links = [...block.querySelectorAll('a')];
  links.forEach((link) => {
    const item = document.createElement('li');
    item.append(link);
    list.append(item);
  });

  const current = document.createElement('li');
  current.setAttribute('aria-current', 'page');
  current.textContent = document.title;
  list.append(current);

  nav.append(list);
  block.textContent = '';
  block.append(nav);
}
"""

_BREADCRUMB_CSS = """.breadcrumb {
  padding: 15px 0;
}

.breadcrumb ol {
  display: flex;
  flex-wrap: wrap;
  gap: 8px;
  margin: 0;
  padding: 0;
  list-style: none;
}

.breadcrumb li + li::before {
  content: '/';
  margin-right: 8px;
  color: #6c757d;
}

.breadcrumb a {
  color: #0066cc;
  text-decoration: none;
}

.breadcrumb [aria-current='page'] {
  color: #333333;
}
"""

_SEARCH_JS = """export default function decorate(block) {
  const form = document.createElement('form');
  form.setAttribute('role', 'search');
  form.action = block.querySelector('a')?.href || '/search';

  const input = document.createElement('input');
  input.type = 'search';
  input.name = 'q';
  input.placeholder = block.textContent.trim() || 'Search';
  input.setAttribute('aria-label', input.placeholder);

  const button = document.createElement('button');
  button.type = 'submit';
  button.textContent = 'Search';

  form.append(input, button);
  block.textContent = '';
  block.append(form);
}
"""

_SEARCH_CSS = """.search form {
  display: flex;
  gap: 10px;
}

.search input {
  flex: 1;
  padding: 10px 15px;
  border: 1px solid #6c757d;
  border-radius: 4px;
  color: #333333;
}

.search input:focus {
  outline: none;
  border-color: #0066cc;
}

.search button {
  padding: 10px 20px;
  border: none;
  border-radius: 4px;
  background: #0066cc;
  color: #ffffff;
  cursor: pointer;
}
"""

# ---------------------------------------------------------------------------
# Content blocks
# ---------------------------------------------------------------------------

_HERO_JS = """export default function decorate(block) {
  const picture = block.querySelector('picture, img');
  if (picture) {
    const media = picture.closest('div');
    media.classList.add('hero-media');
  }

  const content = [...block.querySelectorAll(':scope > div > div')]
    .find((cell) => !cell.classList.contains('hero-media'));
  if (content) content.classList.add('hero-content');

  block.querySelectorAll('a').forEach((link) => {
    link.classList.add('button');
  });
}
"""

_HERO_CSS = """.hero {
  position: relative;
  display: flex;
  align-items: center;
  min-height: 400px;
  padding: 60px 20px;
  background: #333333;
  color: #ffffff;
  overflow: hidden;
}

.hero .hero-media {
  position: absolute;
  inset: 0;
  z-index: 0;
}

.hero .hero-media img {
  width: 100%;
  height: 100%;
  object-fit: cover;
}

.hero .hero-content {
  position: relative;
  z-index: 1;
  max-width: 640px;
}

.hero h1 {
  margin: 0 0 16px;
  font-size: 48px;
}

.hero a.button {
  display: inline-block;
  padding: 12px 24px;
  border-radius: 4px;
  background: #0066cc;
  color: #ffffff;
  text-decoration: none;
}

.hero a.button:hover {
  background: #6c757d;
}

@media (max-width: 768px) {
  .hero {
    min-height: 280px;
  }

  .hero h1 {
    font-size: 32px;
  }
}
"""

_CARDS_JS = """export default function decorate(block) {
  const list = document.createElement('ul');
  [...block.children].forEach((row) => {
    const item = document.createElement('li');
    while (row.firstElementChild) item.append(row.firstElementChild);
    [...item.children].forEach((div) => {
      div.className = div.querySelector('picture, img') ? 'cards-card-image' : 'cards-card-body';
    });
    list.append(item);
  });
  block.textContent = '';
  block.append(list);
}
"""

_CARDS_CSS = """.cards > ul {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(260px, 1fr));
  gap: 24px;
  margin: 0;
  padding: 0;
  list-style: none;
}

.cards > ul > li {
  border: 1px solid #6c757d;
  border-radius: 8px;
  background: #ffffff;
  color: #333333;
  overflow: hidden;
}

.cards .cards-card-image img {
  display: block;
  width: 100%;
  aspect-ratio: 4 / 3;
  object-fit: cover;
}

.cards .cards-card-body {
  padding: 16px;
}

.cards a {
  color: #0066cc;
}
"""

_CTA_JS = """export default function decorate(block) {
  block.querySelectorAll('a').forEach((link, index) => {
    link.classList.add('button', index === 0 ? 'primary' : 'secondary');
  });

  const buttons = block.querySelectorAll('a.button');
  if (buttons.length) {
    const container = document.createElement('p');
    container.className = 'cta-buttons';
    buttons.forEach((button) => container.append(button));
    block.append(container);
  }
}
"""

_CTA_CSS = """.cta {
  padding: 48px 20px;
  text-align: center;
  background: #0066cc;
  color: #ffffff;
}

.cta .cta-buttons {
  display: flex;
  justify-content: center;
  gap: 12px;
}

.cta a.button {
  display: inline-block;
  padding: 12px 24px;
  border-radius: 4px;
  text-decoration: none;
}

.cta a.button.primary {
  background: #ffffff;
  color: #0066cc;
}

.cta a.button.secondary {
  border: 2px solid #ffffff;
  color: #ffffff;
}
"""

_TESTIMONIALS_JS = """export default function decorate(block) {
  [...block.children].forEach((row) => {
    row.classList.add('testimonial');
    const [quote, author] = row.children;
    if (quote) {
      const blockquote = document.createElement('blockquote');
      blockquote.innerHTML = quote.innerHTML;
      quote.replaceWith(blockquote);
    }
    if (author) author.classList.add('testimonial-author');
  });
}
"""

_TESTIMONIALS_CSS = """.testimonials {
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(280px, 1fr));
  gap: 24px;
}

.testimonials .testimonial {
  padding: 24px;
  border-left: 4px solid #0066cc;
  background: #ffffff;
  color: #333333;
}

.testimonials blockquote {
  margin: 0 0 12px;
  font-style: italic;
}

.testimonials .testimonial-author {
  font-weight: 600;
  color: #6c757d;
}
"""

_BUTTON_JS = """export default function decorate(block) {
  const link = block.querySelector('a');
  if (!link) return;
  link.classList.add('button');
  if (block.classList.contains('secondary')) link.classList.add('secondary');
  block.textContent = '';
  block.append(link);
}
"""

_BUTTON_CSS = """.button a.button {
  display: inline-block;
  padding: 12px 24px;
  border-radius: 4px;
  background: #0066cc;
  color: #ffffff;
  text-decoration: none;
  transition: background-color 0.3s;
}

.button a.button:hover {
  background: #6c757d;
}

.button a.button.secondary {
  background: transparent;
  border: 2px solid #0066cc;
  color: #0066cc;
}
"""

_GALLERY_JS = """export default function decorate(block) {
  const images = [...block.querySelectorAll('picture, img')];
  const grid = document.createElement('div');
  grid.className = 'gallery-grid';

  images.forEach((image) => {
    const figure = document.createElement('figure');
    const img = image.tagName === 'IMG' ? image : image.querySelector('img');
    if (img) img.loading = 'lazy';
    figure.append(image);
    figure.addEventListener('click', () => figure.classList.toggle('gallery-zoomed'));
    grid.append(figure);
  });

  block.textContent = '';
  block.append(grid);
}
"""

_GALLERY_CSS = """.gallery .gallery-grid {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(200px, 1fr));
  gap: 12px;
}

.gallery figure {
  margin: 0;
  cursor: zoom-in;
  background: #ffffff;
}

.gallery figure img {
  display: block;
  width: 100%;
  aspect-ratio: 1;
  object-fit: cover;
}

.gallery figure.gallery-zoomed {
  grid-column: 1 / -1;
  cursor: zoom-out;
}

.gallery figure.gallery-zoomed img {
  aspect-ratio: auto;
  outline: 2px solid #0066cc;
}
"""

# ---------------------------------------------------------------------------
# Container blocks
# ---------------------------------------------------------------------------

_CAROUSEL_JS = """export default function decorate(block) {
  const slides = [...block.children];
  slides.forEach((slide, index) => {
    slide.classList.add('carousel-slide');
    slide.setAttribute('aria-hidden', index === 0 ? 'false' : 'true');
  });

  let current = 0;
  const show = (index) => {
    current = (index + slides.length) % slides.length;
    slides.forEach((slide, i) => {
      slide.setAttribute('aria-hidden', i === current ? 'false' : 'true');
    });
  };

  const prev = document.createElement('button');
  prev.className = 'carousel-prev';
  prev.setAttribute('aria-label', 'Previous slide');
  prev.addEventListener('click', () => show(current - 1));

  const next = document.createElement('button');
  next.className = 'carousel-next';
  next.setAttribute('aria-label', 'Next slide');
  next.addEventListener('click', () => show(current + 1));

  block.append(prev, next);

  const observer = new IntersectionObserver((entries) => {
    entries.forEach((entry) => {
      if (entry.isIntersecting) {
        block.querySelectorAll('img').forEach((img) => { img.loading = 'eager'; });
        observer.unobserve(entry.target);
      }
    });
  });
  observer.observe(block);
}
"""

_CAROUSEL_CSS = """.carousel {
  position: relative;
  overflow: hidden;
}

.carousel .carousel-slide[aria-hidden='true'] {
  display: none;
}

.carousel .carousel-slide img {
  width: 100%;
  height: auto;
}

.carousel .carousel-prev,
.carousel .carousel-next {
  position: absolute;
  top: 50%;
  width: 44px;
  height: 44px;
  border: none;
  border-radius: 50%;
  background: #ffffff;
  color: #333333;
  cursor: pointer;
  transform: translateY(-50%);
}

.carousel .carousel-prev {
  left: 12px;
}

.carousel .carousel-next {
  right: 12px;
}

.carousel .carousel-prev:hover,
.carousel .carousel-next:hover {
  background: #0066cc;
  color: #ffffff;
}
"""

_TABS_JS = """export default function decorate(block) {
  const tablist = document.createElement('div');
  tablist.className = 'tabs-list';
  tablist.setAttribute('role', 'tablist');

  const panels = [...block.children];
  panels.forEach((panel, index) => {
    const [label, content] = panel.children;
    const id = `tab-${index}`;

    const button = document.createElement('button');
    button.className = 'tabs-tab';
    button.id = `${id}-label`;
    button.setAttribute('role', 'tab');
    button.setAttribute('aria-controls', id);
    button.setAttribute('aria-selected', index === 0 ? 'true' : 'false');
    button.textContent = label ? label.textContent.trim() : `Tab ${index + 1}`;

    panel.id = id;
    panel.className = 'tabs-panel';
    panel.setAttribute('role', 'tabpanel');
    panel.setAttribute('aria-labelledby', button.id);
    panel.setAttribute('aria-hidden', index === 0 ? 'false' : 'true');
    if (label) label.remove();
    if (content) panel.append(content);

    button.addEventListener('click', () => {
      tablist.querySelectorAll('button').forEach((b) => b.setAttribute('aria-selected', 'false'));
      panels.forEach((p) => p.setAttribute('aria-hidden', 'true'));
      button.setAttribute('aria-selected', 'true');
      panel.setAttribute('aria-hidden', 'false');
    });
    tablist.append(button);
  });

  block.prepend(tablist);
}
"""

_TABS_CSS = """.tabs .tabs-list {
  display: flex;
  gap: 4px;
  border-bottom: 2px solid #6c757d;
}

.tabs .tabs-tab {
  padding: 10px 20px;
  border: none;
  background: transparent;
  color: #333333;
  cursor: pointer;
}

.tabs .tabs-tab[aria-selected='true'] {
  border-bottom: 2px solid #0066cc;
  color: #0066cc;
}

.tabs .tabs-panel {
  padding: 20px 0;
}

.tabs .tabs-panel[aria-hidden='true'] {
  display: none;
}
"""

_ACCORDION_JS = """export default function decorate(block) {
  [...block.children].forEach((row) => {
    const [label, body] = row.children;
    const details = document.createElement('details');
    details.className = 'accordion-item';

    const summary = document.createElement('summary');
    summary.className = 'accordion-item-label';
    if (label) summary.append(...label.childNodes);

    details.append(summary);
    if (body) {
      body.className = 'accordion-item-body';
      details.append(body);
    }
    row.replaceWith(details);
  });
}
"""

_ACCORDION_CSS = """.accordion details {
  border: 1px solid #6c757d;
  border-radius: 4px;
  margin-bottom: 8px;
  background: #ffffff;
}

.accordion summary {
  padding: 14px 16px;
  color: #333333;
  font-weight: 600;
  cursor: pointer;
}

.accordion details[open] summary {
  color: #0066cc;
}

.accordion .accordion-item-body {
  padding: 0 16px 16px;
}
"""

_COLUMNS_JS = """export default function decorate(block) {
  const cols = [...block.firstElementChild.children];
  block.classList.add(`columns-${cols.length}-cols`);

  [...block.children].forEach((row) => {
    [...row.children].forEach((col) => {
      if (col.querySelector('picture, img') && col.children.length === 1) {
        col.classList.add('columns-img-col');
      }
    });
  });
}
"""

_COLUMNS_CSS = """.columns > div {
  display: flex;
  flex-direction: column;
  gap: 24px;
}

.columns > div > div {
  flex: 1;
  color: #333333;
}

.columns .columns-img-col img {
  display: block;
  width: 100%;
}

.columns a {
  color: #0066cc;
}

@media (min-width: 900px) {
  .columns > div {
    flex-direction: row;
    align-items: center;
  }
}
"""

# ---------------------------------------------------------------------------
# Form block
# ---------------------------------------------------------------------------

_FORM_JS = """function createField(label, type) {
  const wrapper = document.createElement('div');
  wrapper.className = 'form-field';
  const id = `form-${label.toLowerCase().replace(/[^a-z0-9]+/g, '-')}`;

  const labelEl = document.createElement('label');
  labelEl.htmlFor = id;
  labelEl.textContent = label;

  const input = type === 'textarea' ? document.createElement('textarea') : document.createElement('input');
  if (type !== 'textarea') input.type = type || 'text';
  input.id = id;
  input.name = id;

  wrapper.append(labelEl, input);
  return wrapper;
}

export default function decorate(block) {
  const form = document.createElement('form');
  const action = block.querySelector('a')?.href;
  if (action) form.action = action;

  [...block.children].forEach((row) => {
    const [label, type] = [...row.children].map((cell) => cell.textContent.trim());
    if (label && !row.querySelector('a')) form.append(createField(label, type));
  });

  const submit = document.createElement('button');
  submit.type = 'submit';
  submit.textContent = 'Submit';
  form.append(submit);

  form.addEventListener('submit', async (event) => {
    event.preventDefault();
    const status = document.createElement('div');
    try {
      const response = await fetch(form.action, { method: 'POST', body: new FormData(form) });
      status.className = response.ok ? 'form-success' : 'form-error';
      status.textContent = response.ok ? 'Thank you!' : 'Something went wrong.';
    } catch (e) {
      status.className = 'form-error';
      status.textContent = 'Something went wrong.';
    }
    form.replaceWith(status);
  });

  block.textContent = '';
  block.append(form);
}
"""

_FORM_CSS = """.form form {
  display: flex;
  flex-direction: column;
  gap: 16px;
  max-width: 600px;
}

.form .form-field {
  display: flex;
  flex-direction: column;
  gap: 6px;
}

.form label {
  color: #333333;
  font-weight: 600;
}

.form input,
.form textarea {
  padding: 10px 12px;
  border: 1px solid #6c757d;
  border-radius: 4px;
}

.form input:focus,
.form textarea:focus {
  outline: 2px solid #0066cc;
}

.form button[type='submit'] {
  align-self: flex-start;
  padding: 12px 24px;
  border: none;
  border-radius: 4px;
  background: #0066cc;
  color: #ffffff;
  cursor: pointer;
}

.form-success {
  padding: 20px;
  background: #d4edda;
  color: #155724;
  border-radius: 4px;
  text-align: center;
}

.form-error {
  padding: 15px;
  background: #f8d7da;
  color: #721c24;
  border-radius: 4px;
}
"""

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

BLOCK_LIBRARY: dict[str, BlockDefinition] = {
    b.name: b
    for b in (
        BlockDefinition("header", "template", "Sticky site header with logo and tools", _HEADER_JS, _HEADER_CSS),
        BlockDefinition(
            "navigation", "template", "Primary site navigation with dropdown support", _NAVIGATION_JS, _NAVIGATION_CSS
        ),
        BlockDefinition("footer", "template", "Site footer with link columns and legal line", _FOOTER_JS, _FOOTER_CSS),
        BlockDefinition(
            "breadcrumb", "template", "Hierarchical page navigation breadcrumb trail", _BREADCRUMB_JS, _BREADCRUMB_CSS
        ),
        BlockDefinition("search", "template", "Quick search form", _SEARCH_JS, _SEARCH_CSS),
        BlockDefinition("hero", "content", "Full-width hero banner with call-to-action buttons", _HERO_JS, _HERO_CSS),
        BlockDefinition("cards", "content", "Responsive grid of image and text cards", _CARDS_JS, _CARDS_CSS),
        BlockDefinition("cta", "content", "Call to action section with primary/secondary buttons", _CTA_JS, _CTA_CSS),
        BlockDefinition(
            "testimonials", "content", "Customer quotes with author attribution", _TESTIMONIALS_JS, _TESTIMONIALS_CSS
        ),
        BlockDefinition("button", "content", "Standalone link button", _BUTTON_JS, _BUTTON_CSS),
        BlockDefinition("gallery", "content", "Lazy-loaded image gallery with zoom", _GALLERY_JS, _GALLERY_CSS),
        BlockDefinition("carousel", "container", "Slide carousel with previous/next controls", _CAROUSEL_JS, _CAROUSEL_CSS),
        BlockDefinition("tabs", "container", "Accessible tabbed content panels", _TABS_JS, _TABS_CSS),
        BlockDefinition("accordion", "container", "Expandable question/answer panels", _ACCORDION_JS, _ACCORDION_CSS),
        BlockDefinition("columns", "container", "Responsive multi-column layout", _COLUMNS_JS, _COLUMNS_CSS),
        BlockDefinition("form", "form", "Contact form with validation and submit feedback", _FORM_JS, _FORM_CSS),
    )
}

CATEGORIES: tuple[str, ...] = ("template", "content", "container", "form")


def get_block(name: str) -> BlockDefinition | None:
    """Library entry for *name* (case-insensitive), or None."""
    return BLOCK_LIBRARY.get((name or "").strip().lower())


def list_categories() -> dict[str, int]:
    """``{category: number of blocks}`` in display order."""
    return {cat: len(blocks_in_category(cat)) for cat in CATEGORIES}


def blocks_in_category(category: str) -> list[BlockDefinition]:
    key = (category or "").strip().lower()
    if key not in CATEGORIES:
        raise InvalidInputError(f"Unknown category '{category}'. Use one of: {', '.join(CATEGORIES)}.")
    return [b for b in BLOCK_LIBRARY.values() if b.category == key]


def search_blocks(query: str) -> list[BlockDefinition]:
    """Blocks whose name or description contains *query* (case-insensitive)."""
    q = (query or "").strip().lower()
    if not q:
        return list(BLOCK_LIBRARY.values())
    return [b for b in BLOCK_LIBRARY.values() if q in b.name or q in b.description.lower()]
