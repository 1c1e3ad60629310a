"""Tests for tagkit.filters module."""

from jinja2 import DictLoader, Environment

from tagkit.filters import create_environment, register_filters, tag_filters


class TestRegisterFilters:
    def test_installs_both_filters(self):
        env = Environment()
        returned = register_filters(env)
        assert returned is env
        assert env.filters["sort_tags_by_count"] is tag_filters()["sort_tags_by_count"]
        assert "tag_url" in env.filters

    def test_filter_table_names(self):
        assert set(tag_filters("/blog")) == {"tag_url", "sort_tags_by_count"}

    def test_bound_tag_url(self):
        assert tag_filters("/blog")["tag_url"]("Hello World") == "/blog/tag/hello-world"

    def test_tag_url_filter(self):
        env = register_filters(Environment())
        assert env.from_string("{{ 'Hello World' | tag_url }}").render() == "/tag/hello-world"

    def test_tag_url_filter_uses_baseurl(self):
        env = register_filters(Environment(), baseurl="/blog")
        assert env.from_string("{{ 'C++' | tag_url }}").render() == "/blog/tag/c"

    def test_environments_are_independent(self):
        blog = register_filters(Environment(), baseurl="/blog")
        docs = register_filters(Environment(), baseurl="/docs")
        template = "{{ 'x' | tag_url }}"
        assert blog.from_string(template).render() == "/blog/tag/x"
        assert docs.from_string(template).render() == "/docs/tag/x"

    def test_sort_filter_in_loop(self):
        env = register_filters(Environment())
        template = env.from_string(
            "{% for tag, posts in tags | sort_tags_by_count %}"
            "{{ tag }}={{ posts | length }};"
            "{% endfor %}"
        )
        tags = {"a": [1], "b": [1, 2, 3], "c": [1, 2]}
        assert template.render(tags=tags) == "b=3;c=2;a=1;"


class TestCreateEnvironment:
    def test_filters_registered(self):
        env = create_environment(baseurl="/site")
        assert env.from_string("{{ 'Foo' | tag_url }}").render() == "/site/tag/foo"

    def test_html_templates_autoescape(self):
        env = create_environment(loader=DictLoader({"t.html": "{{ tag }}"}))
        assert env.get_template("t.html").render(tag="<b>") == "&lt;b&gt;"

    def test_text_templates_not_escaped(self):
        env = create_environment(loader=DictLoader({"t.txt": "{{ tag }}"}))
        assert env.get_template("t.txt").render(tag="<b>") == "<b>"
