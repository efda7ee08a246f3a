"""Display-time rewriting of article bodies into HTML fragments."""

import re

MEDIA_CLASS = "w-full max-w-2xl mx-auto my-6 rounded-lg shadow-md"
VIDEO_FALLBACK = "Your browser does not support the video tag."

MARKDOWN_IMAGE_RE = re.compile(r'!\[([^\]]*)\]\(([^)]+)\)')
VIDEO_TAG_RE = re.compile(r'<video\s+src="([^"]+)"(?:\s*controls)?\s*></video>')

# A bare URL must not follow a quote or "(" so that URLs already emitted
# into src attributes or markdown links are left alone.
BARE_IMAGE_URL_RE = re.compile(
    r'(?<!["\'(])https?://[^\s"]+\.(?:jpg|jpeg|png|gif|webp|svg|tiff|bmp|ico)(?![\w.])',
    re.IGNORECASE,
)
BARE_VIDEO_URL_RE = re.compile(
    r'(?<!["\'(])https?://[^\s"]+\.(?:mp4|webm|ogg|mov|avi|wmv|flv|mkv)(?![\w.])',
    re.IGNORECASE,
)


def image_html(src: str, alt: str) -> str:
    return f'<img src="{src}" alt="{alt}" class="{MEDIA_CLASS}" />'


def video_html(src: str) -> str:
    return (
        f'<div class="{MEDIA_CLASS} overflow-hidden">'
        f'<video src="{src}" controls class="w-full h-auto">'
        f'<source src="{src}">'
        f'{VIDEO_FALLBACK}'
        '</video>'
        '</div>'
    )


def render_content(text: str) -> str:
    """
    Rewrite embedded media references in an article body as HTML.

    Markdown images and explicit <video src="..."> tags are converted
    first, then bare image and video URLs. Anything that does not match
    passes through unchanged.
    """
    if not text:
        return ""

    rendered = MARKDOWN_IMAGE_RE.sub(lambda m: image_html(m.group(2), m.group(1)), text)
    rendered = VIDEO_TAG_RE.sub(lambda m: video_html(m.group(1)), rendered)
    rendered = BARE_IMAGE_URL_RE.sub(lambda m: image_html(m.group(0), "Image"), rendered)
    rendered = BARE_VIDEO_URL_RE.sub(lambda m: video_html(m.group(0)), rendered)
    return rendered
