from recycling_news.renderer import VIDEO_FALLBACK, render_content


def test_markdown_image_becomes_img():
    html = render_content("see ![cat](http://x/a.png) here")

    assert html.startswith("see <img ")
    assert 'src="http://x/a.png"' in html
    assert 'alt="cat"' in html
    assert html.endswith(" here")


def test_markdown_image_url_is_not_wrapped_twice():
    html = render_content("![cat](http://x/a.png)")
    assert html.count("<img") == 1
    assert html.count("http://x/a.png") == 1


def test_video_tag_is_wrapped_with_fallback():
    html = render_content('<video src="/uploads/clip.mp4" controls></video>')

    assert html.startswith("<div")
    assert '<video src="/uploads/clip.mp4" controls' in html
    assert '<source src="/uploads/clip.mp4">' in html
    assert VIDEO_FALLBACK in html
    assert html.count("<video") == 1


def test_bare_video_url_becomes_video_block():
    html = render_content("watch http://x/b.mp4 now")

    assert html.startswith("watch <div")
    assert '<video src="http://x/b.mp4"' in html
    assert VIDEO_FALLBACK in html
    assert html.endswith("</div> now")


def test_bare_image_url_becomes_img():
    html = render_content("https://cdn.example.com/yard.JPG")
    assert html == (
        '<img src="https://cdn.example.com/yard.JPG" alt="Image" '
        'class="w-full max-w-2xl mx-auto my-6 rounded-lg shadow-md" />'
    )


def test_quoted_or_parenthesised_urls_are_left_alone():
    text = 'link "http://x/a.png" and (http://x/b.mp4)'
    assert render_content(text) == text


def test_non_media_urls_and_malformed_markup_pass_through():
    text = "read http://x/page.html and ![broken](http://x/a.png and <video src=x></video>"
    assert render_content(text) == text


def test_empty_body():
    assert render_content("") == ""
