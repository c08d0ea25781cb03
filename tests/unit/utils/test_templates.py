"""Unit tests for HTML rendering in templates.py.

Test coverage includes:

1. render_index() renders the create form
2. render_paste() shows paste metadata and escapes user input
3. render_not_found() renders the fallback page
"""

from datetime import datetime, UTC

from cloudpaste.models import PasteModel
from cloudpaste.utils.config import PasteSettings
from cloudpaste.utils.templates import render_index, render_paste, render_not_found


PASTE_ID = '0f8fad5bd9cb469fa16570867728950e'
CREATE_URL = 'https://paste.example.com/paste'


def test_render_index():
    html = render_index(PasteSettings(base_url='https://paste.example.com'), CREATE_URL)

    assert f'<form class="pure-form pure-form-stacked" method="POST" action="{CREATE_URL}">' in html
    for name in ('paste-title', 'paste-author', 'paste-content', 'expiration', 'privacy'):
        assert f'name="{name}"' in html
    for option in ('1 hour', '24 hours', 'Never', 'Public', 'Unlisted'):
        assert f'<option>{option}</option>' in html


def test_render_index_without_never_expiring_pastes():
    html = render_index(PasteSettings(base_url='https://paste.example.com', allow_never_expire=False), CREATE_URL)

    assert '<option>24 hours</option>' in html
    assert 'Never' not in html


def test_render_paste():
    paste = PasteModel(
        content='Hello',
        unlisted=True,
        title='Greeting',
        author='Alice',
        expires_at=datetime(2025, 10, 15, 13, 0, 0, tzinfo=UTC),
    )

    html = render_paste(paste, PASTE_ID)

    assert '<title>Greeting' in html
    assert 'author: Alice' in html
    assert 'unlisted' in html
    assert 'datetime="2025-10-15T13:00:00+00:00"' in html
    assert f'<pre class="content" id="paste-{PASTE_ID}">Hello</pre>' in html


def test_render_untitled_anonymous_paste():
    html = render_paste(PasteModel(content='Hello'), PASTE_ID)

    assert 'Untitled paste' in html
    assert 'author: anonymous' in html
    assert 'public' in html
    assert 'never expires' in html


def test_render_paste_escapes_html():
    paste = PasteModel(content='<script>alert(1)</script>', title='<b>bold</b>', author='"quoted" & co')

    html = render_paste(paste, PASTE_ID)

    assert '<script>' not in html
    assert '&lt;script&gt;alert(1)&lt;/script&gt;' in html
    assert '&lt;b&gt;bold&lt;/b&gt;' in html
    assert '&#34;quoted&#34; &amp; co' in html


def test_render_not_found():
    html = render_not_found()

    assert 'Paste not found' in html
    assert '<html' in html
