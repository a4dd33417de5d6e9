"""Jinja2 page shell for the generated presentation."""

from __future__ import annotations

from jinja2 import BaseLoader, Environment

BASE_CSS = """
      body, html { margin: 0; padding: 0; height: 100%; width: 100%; overflow: hidden; background-color: #111; }
      #presentation-container {
        display: flex;
        justify-content: center;
        align-items: center;
        width: 100%;
        height: 100%;
      }
      #viewport {
        width: 100vw;
        height: 56.25vw; /* 16:9 */
        max-height: 100vh;
        max-width: 177.78vh;
        position: relative;
        overflow: hidden;
        background-color: #000;
        box-shadow: 0 0 20px rgba(0,0,0,0.5);
      }
      .slide {
        width: 100%;
        height: 100%;
        font-size: 4.2vh;
        position: absolute;
        top: 0;
        left: 0;
        opacity: 0;
        visibility: hidden;
        transition: opacity 0.5s ease-in-out, visibility 0.5s;
      }
      .slide.active {
        opacity: 1;
        visibility: visible;
        z-index: 1;
      }
      .content-element {
        box-sizing: border-box;
        padding: 1em;
        padding-top: 0;
      }
      .text-content h1, .text-content h2, .text-content h3, .text-content h4, .text-content h5, .text-content p, .text-content ul, .text-content ol {
        margin: 0.5em 0;
        margin-top: 0;
      }
      .content-element img, .content-element video {
        max-width: 100%;
        max-height: 100%;
        height: auto;
        width: auto;
        display: block;
      }
      #nav-menu {
        position: fixed;
        top: 15px;
        left: 15px;
        z-index: 100;
        background-color: rgba(0,0,0,0.7);
        border-radius: 5px;
        padding: 8px;
        display: flex;
        gap: 5px;
        opacity: 1;
        transition: opacity 0.3s ease-in-out;
      }
      #nav-menu.hidden {
        opacity: 0;
        pointer-events: none;
      }
      #nav-menu button, #nav-menu select {
        background-color: #444;
        color: white;
        border: none;
        border-radius: 3px;
        padding: 5px 8px;
        cursor: pointer;
        font-size: 16px;
      }
      #nav-menu button:hover, #nav-menu select:hover {
        background-color: #666;
      }
      pre[class*="language-"] {
        background: transparent;
        margin: 0;
      }
"""

NAVIGATION_JS = """
      let currentSlide = 0;
      const slides = document.querySelectorAll('.slide');
      const slideSelect = document.getElementById('slide-select');
      const navMenu = document.getElementById('nav-menu');
      let hideMenuTimer;

      function showSlide(index) {
        if (index < 0 || index >= totalSlides) return;
        slides[currentSlide].classList.remove('active');
        currentSlide = index;
        slides[currentSlide].classList.add('active');
        if (slideSelect) {
          slideSelect.value = currentSlide;
        }
      }

      function nextSlide() { showSlide(currentSlide + 1); }
      function prevSlide() { showSlide(currentSlide - 1); }

      function toggleFullscreen() {
        if (!document.fullscreenElement) {
          document.documentElement.requestFullscreen();
        } else if (document.exitFullscreen) {
          document.exitFullscreen();
        }
      }

      function showMenu() {
        navMenu.classList.remove('hidden');
        clearTimeout(hideMenuTimer);
        hideMenuTimer = setTimeout(() => {
          navMenu.classList.add('hidden');
        }, 5000);
      }

      document.addEventListener('keydown', (e) => {
        if (e.key === 'ArrowRight') nextSlide();
        if (e.key === 'ArrowLeft') prevSlide();
      });
      document.addEventListener('mousemove', showMenu);
      document.getElementById('btn-prev').addEventListener('click', prevSlide);
      document.getElementById('btn-next').addEventListener('click', nextSlide);
      document.getElementById('btn-fullscreen').addEventListener('click', toggleFullscreen);
      slideSelect.addEventListener('change', (e) => {
        showSlide(parseInt(e.target.value, 10));
      });

      if (totalSlides > 0) showSlide(0);
      showMenu();
      if (window.Prism) Prism.highlightAll();
"""

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{ title }}</title>
<style>
{{ highlighter_css | safe }}
{{ base_css | safe }}
</style>
</head>
<body>
<div id="nav-menu">
<button id="btn-prev" title="Previous Slide">&#9664;</button>
<button id="btn-next" title="Next Slide">&#9654;</button>
<select id="slide-select">
{%- for option in options %}
<option value="{{ option.value }}">{{ option.label }}</option>
{%- endfor %}
</select>
<button id="btn-fullscreen" title="Toggle Fullscreen">&#x26F6;</button>
</div>
<div id="presentation-container">
<div id="viewport">
{%- for slide in slides %}
<div class="slide{% if slide.active %} active{% endif %}" id="slide-{{ slide.index }}"
{%- if slide.background %} style="background: {{ slide.background }};"{% endif %}>
{{ slide.content | safe }}
</div>
{%- endfor %}
</div>
</div>
<script>
{{ highlighter_js | safe }}
</script>
<script>
      const totalSlides = {{ slide_count }};
{{ navigation_js | safe }}
</script>
</body>
</html>
"""

_environment = Environment(loader=BaseLoader(), autoescape=True, keep_trailing_newline=True)


def render_page(**context) -> str:
    """Render the page shell. Slide content and assets are inserted verbatim."""
    template = _environment.from_string(PAGE_TEMPLATE)
    return template.render(base_css=BASE_CSS, navigation_js=NAVIGATION_JS, **context)
