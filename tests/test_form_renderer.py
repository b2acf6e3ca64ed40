from __future__ import annotations

from bs4 import BeautifulSoup

from adapters.content_forms import FORMS, PostForm, get_form
from adapters.form_renderer import render_form
from adapters.html_exporter import export_form_html, render_form_page
from core.config import AppSettings
from core.domain.content import Post
from core.interfaces.editable import ContentForm


def test_post_form_implements_protocol(settings):
    assert isinstance(PostForm(settings), ContentForm)
    assert isinstance(get_form("Post", settings), PostForm)
    assert set(FORMS) == {"Post"}


def test_post_form_field_order(post, settings):
    html = "".join(str(f.view) for f in PostForm(settings).fields(post))
    soup = BeautifulSoup(html, "html.parser")
    names = [el["name"] for el in soup.find_all(["input", "select"]) if el.get("name")]
    assert names[:2] == ["title", "body"]
    assert "category.2" in names
    assert names[-1] == "publish_date"


def test_render_form_existing_content(post, settings):
    fields = PostForm(settings).fields(post)
    soup = BeautifulSoup(str(render_form(post, fields, settings=settings)), "html.parser")

    form = soup.find("form")
    assert form["method"] == "post"
    assert form["action"] == "/admin/edit?type=Post"
    assert form["enctype"] == "multipart/form-data"

    hidden = {
        el["name"]: el["value"]
        for el in form.find_all("input", type="hidden", recursive=False)
    }
    assert hidden == {
        "id": "7",
        "uuid": "6f1c9a52-0d4e-4d7e-9a55-3b3f0d6c2b11",
        "slug": "hello-world",
        "type": "Post",
    }

    # Field views are nested markup, not escaped text.
    assert form.find("input", attrs={"name": "title"})["value"] == 'Hello "World"'
    buttons = [b["value"] for b in form.find_all("button")]
    assert buttons == ["save", "delete"]


def test_render_form_new_content_has_no_delete(settings):
    content = Post()
    soup = BeautifulSoup(
        str(render_form(content, PostForm(settings).fields(content), settings=settings)),
        "html.parser",
    )
    assert [b.get_text() for b in soup.find_all("button")] == ["Save"]


def test_render_form_uses_configured_edit_url(post):
    custom = AppSettings(_env_file=None, edit_url="/cms/edit", default_language="es")
    soup = BeautifulSoup(str(render_form(post, [], settings=custom)), "html.parser")
    assert soup.find("form")["action"] == "/cms/edit?type=Post"
    assert [b.get_text() for b in soup.find_all("button")] == ["Guardar", "Eliminar"]


def test_render_form_page(post, settings):
    html = render_form_page(content=post, settings=settings)
    assert html.startswith("<!doctype html>")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.find("h1").get_text() == "Post: hello-world"
    assert soup.find("form") is not None
    assert soup.find("html")["lang"] == "en"


def test_export_form_html(tmp_path, settings):
    path = export_form_html(content=Post(), output_path=tmp_path / "out" / "new.html", settings=settings)
    assert path.exists()
    assert "New Post" in path.read_text(encoding="utf-8")
