"""tagkit CLI - Click command definitions and main entry point."""

from __future__ import annotations

from pathlib import Path

import click
import orjson
from jinja2 import FileSystemLoader, TemplateError, TemplateNotFound
from rich.console import Console
from rich.panel import Panel

from tagkit.filters import create_environment
from tagkit.index import build_tag_index, tag_records
from tagkit.output import dump_json, save_json, save_text

console = Console(stderr=True)


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-m", "--mode",
    type=click.Choice(["index", "render"]),
    default="index",
    help="Output mode (default: index)",
)
@click.option("-t", "--template", "template_path",
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help="Jinja2 template to render (render mode)")
@click.option("-o", "--output", "output_path", type=click.Path(), default=None,
              help="Output file or directory. Omit for stdout.")
@click.option("--baseurl", default="", help="Site base path prepended to tag URLs")
@click.option("--limit", default=None, type=click.IntRange(min=0),
              help="Keep only the N most used tags (index mode)")
@click.option("-v", "--verbose", is_flag=True, help="Verbose progress output")
def main(
    source: Path,
    mode: str,
    template_path: Path | None,
    output_path: str | None,
    baseurl: str,
    limit: int | None,
    verbose: bool,
):
    """Build tag pages data from a JSON list of posts.

    SOURCE is a JSON file holding a list of posts, or an object with a
    "posts" list. Each post may carry a "tags" list.

    \b
    Examples:
        tagkit posts.json                              # tag index to stdout
        tagkit posts.json --baseurl /blog -o out/      # save out/tags.json
        tagkit posts.json -m render -t tags.html       # render a template
    """
    if mode == "render" and template_path is None:
        raise click.ClickException("Render mode requires -t/--template")

    if verbose:
        console.print(Panel(
            f"[bold]tagkit - Tag pages[/bold]\n{source}\nMode: {mode}",
            expand=False,
        ))

    posts = _load_posts(source)
    tags = build_tag_index(posts)

    if verbose:
        console.print(f"[dim]Loaded {len(posts)} posts, {len(tags)} tags[/dim]")

    if mode == "index":
        records = tag_records(tags, baseurl=baseurl, limit=limit)
        if output_path:
            out = _resolve_output(output_path, "tags.json")
            size = save_json(records, out)
            size_str = f" ({size} bytes)" if verbose else ""
            console.print(f"[green]Saved:[/green] {out}{size_str}")
        else:
            click.echo(dump_json(records).decode())

    elif mode == "render":
        rendered = _render_template(template_path, baseurl, posts, tags)
        if output_path:
            out = _resolve_output(output_path, template_path.name)
            if out.resolve() == template_path.resolve():
                raise click.ClickException(
                    f"Refusing to overwrite the template itself: {template_path}"
                )
            save_text(rendered, out)
            console.print(f"[green]Saved:[/green] {out}")
        else:
            click.echo(rendered)


def _load_posts(source: Path) -> list[dict]:
    """Read the posts list from a JSON file."""
    try:
        data = orjson.loads(source.read_bytes())
    except orjson.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {source}: {e}")

    if isinstance(data, dict):
        data = data.get("posts")
    if not isinstance(data, list) or not all(isinstance(p, dict) for p in data):
        raise click.ClickException(
            f"{source} must hold a list of post objects or {{\"posts\": [...]}}"
        )
    for i, post in enumerate(data):
        if not _valid_tags(post.get("tags")):
            raise click.ClickException(f"{source}: post {i} has invalid tags")
    return data


def _valid_tags(tags) -> bool:
    """Missing, null, a single label, or a list of scalar labels."""
    if tags is None or isinstance(tags, str):
        return True
    return isinstance(tags, list) and all(
        isinstance(label, (str, int, float, bool)) for label in tags
    )


def _render_template(
    template_path: Path, baseurl: str, posts: list[dict], tags: dict[str, list],
) -> str:
    """Render a template file with the tag filters registered."""
    env = create_environment(
        baseurl=baseurl, loader=FileSystemLoader(str(template_path.parent)),
    )
    try:
        template = env.get_template(template_path.name)
        return template.render(
            site={"baseurl": baseurl, "tags": tags},
            tags=tags,
            posts=posts,
        )
    except TemplateNotFound as e:
        raise click.ClickException(f"Template not found: {e.name}")
    except TemplateError as e:
        raise click.ClickException(f"Template error in {template_path}: {e}")


def _resolve_output(output_path: str, default_name: str) -> Path:
    """Directory outputs get a default file name inside them."""
    out = Path(output_path)
    if out.is_dir() or output_path.endswith("/"):
        out.mkdir(parents=True, exist_ok=True)
        out = out / default_name
    return out


if __name__ == "__main__":
    main()
