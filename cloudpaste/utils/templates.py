"""HTML rendering for paste pages

Templates live in the `cloudpaste/templates/` package directory and are
rendered with Jinja2 (HTML autoescaping enabled).

Functions:
    render_index(settings: PasteSettings, create_url: str) -> str
        Render the create-paste form.
    render_paste(paste: PasteModel, paste_id: str) -> str
        Render a stored paste as a full HTML page.
    render_not_found() -> str
        Render the static fallback page for unknown pastes.
"""

import functools

from jinja2 import Environment, PackageLoader, select_autoescape

from cloudpaste.constants import Form, EXPIRATION_CHOICES, NEVER_EXPIRE, PRIVACY_CHOICES
from cloudpaste.models import PasteModel
from cloudpaste.utils.config import PasteSettings


@functools.cache
def template_environment() -> Environment:
    return Environment(
        loader=PackageLoader('cloudpaste', 'templates'),
        autoescape=select_autoescape(['html']),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_index(settings: PasteSettings, create_url: str) -> str:
    """Render the create-paste form

    Field names and option values are the ones the create endpoint accepts.
    "Never" is only offered when never-expiring pastes are allowed.
    """
    expiration_choices = [
        choice for choice in EXPIRATION_CHOICES if choice != NEVER_EXPIRE or settings.allow_never_expire
    ]
    template = template_environment().get_template('index.html')
    return template.render(
        create_url=create_url,
        fields=Form,
        expiration_choices=expiration_choices,
        privacy_choices=list(PRIVACY_CHOICES),
    )


def render_paste(paste: PasteModel, paste_id: str) -> str:
    template = template_environment().get_template('paste.html')
    return template.render(paste=paste, paste_id=paste_id)


def render_not_found() -> str:
    return template_environment().get_template('not_found.html').render()
