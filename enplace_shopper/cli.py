"""CLI entry point for EnPlace Shopper."""

import json
from typing import NoReturn

import click

from . import __version__
from .checklist import Checklist, ChecklistError, find_item, load_checklist, save_checklist
from .config import (
    CHECKLIST_FILE,
    get_log_file,
    get_log_format,
    get_log_level,
    get_recipes_file,
)
from .export import export_shopping_list, format_shopping_list_text
from .ingredient_parser import ParsedIngredient, parse_ingredient
from .logging_config import configure_logging
from .recipe_parser import (
    Recipe,
    RecipeLoadError,
    load_recipes,
    parse_recipe_text,
    select_recipes,
)
from .shopping_list import ShoppingCategory, aggregate
from .units import format_quantity

# Options shared by commands that build a shopping list
_recipe_source_options = [
    click.option(
        "--file",
        "-f",
        "recipes_file",
        type=click.Path(dir_okay=False),
        help="Recipes JSON file (default: $ENPLACE_RECIPES_FILE)",
    ),
    click.option(
        "--recipe", "-r", "titles", multiple=True, help="Recipe title to include (repeatable)"
    ),
    click.option(
        "--text",
        "-t",
        "input_text",
        help="Ingredient lines as text (separate with ; or newlines)",
    ),
    click.option("--title", help="Recipe title (for text input)"),
]


def recipe_source_options(func):
    for option in reversed(_recipe_source_options):
        func = option(func)
    return func


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    click.echo(f"✗ {message}", err=True)
    raise SystemExit(1)


def load_selected_recipes(
    recipes_file: str | None,
    titles: tuple[str, ...],
    input_text: str | None,
    title: str | None,
) -> list[Recipe]:
    """Resolve the recipes a command works on, from text or a recipes file."""
    if input_text:
        # Semicolons separate lines; commas belong to preparation clauses
        if ";" in input_text and "\n" not in input_text:
            input_text = input_text.replace(";", "\n")
        return [parse_recipe_text(title or "Manual Recipe", input_text)]

    path = recipes_file or get_recipes_file()
    if path is None:
        fail("No recipes given. Use --file, --text, or set ENPLACE_RECIPES_FILE.")

    try:
        return select_recipes(load_recipes(path), titles)
    except RecipeLoadError as e:
        fail(str(e))


def display_parsed(index: int, ingredient: ParsedIngredient) -> None:
    """Display one parsed ingredient line."""
    quantity = format_quantity(ingredient.quantity) if ingredient.quantity is not None else "-"
    click.echo(f"\n{index}. {ingredient.original}")
    click.echo(f"   Quantity:    {quantity}")
    click.echo(f"   Unit:        {ingredient.unit or '-'}")
    click.echo(f"   Name:        {ingredient.name}")
    click.echo(f"   Preparation: {ingredient.preparation or '-'}")
    click.echo(f"   Category:    {ingredient.category}")


def display_shopping_list(
    groups: list[ShoppingCategory], recipes: list[Recipe], checklist: Checklist
) -> None:
    """Display a shopping list with check marks and progress."""
    click.echo()
    click.echo(format_shopping_list_text(groups, len(recipes), checklist).rstrip())

    done, total = checklist.progress(groups)
    click.echo()
    click.echo("-" * 60)
    click.echo(f"Recipes: {', '.join(r.title for r in recipes) or '-'}")
    click.echo(f"Checked: {done}/{total}")
    click.echo("-" * 60)


# ============================================================================
# Main CLI Group
# ============================================================================


@click.group()
@click.version_option(version=__version__, prog_name="enplace")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """EnPlace Shopping List Tool.

    Parse recipe ingredient lines, merge them into one shopping list grouped
    by category, and tick items off as you shop.
    """
    try:
        configure_logging(
            "DEBUG" if verbose else get_log_level(),
            json_format=get_log_format() == "json",
            log_file=get_log_file(),
        )
    except OSError as e:
        fail(f"Cannot open log file: {e}")


# ============================================================================
# Parsing & List Commands
# ============================================================================


@cli.command("parse")
@click.argument("lines", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Output parsed fields as JSON")
def parse_cmd(lines: tuple[str, ...], as_json: bool):
    """Parse ingredient lines and show their fields.

    Examples:

    \b
        enplace parse "2 tbsp olive oil"
        enplace parse "1 lb chicken breast, cubed" "½ onion" --json
    """
    parsed = [parse_ingredient(line) for line in lines]

    if as_json:
        click.echo(json.dumps([p.to_dict() for p in parsed], indent=2, ensure_ascii=False))
        return

    for i, ingredient in enumerate(parsed, 1):
        display_parsed(i, ingredient)
    click.echo()


@cli.command("recipes")
@click.option(
    "--file",
    "-f",
    "recipes_file",
    type=click.Path(dir_okay=False),
    help="Recipes JSON file (default: $ENPLACE_RECIPES_FILE)",
)
def recipes_cmd(recipes_file: str | None):
    """List the recipes in a recipes file."""
    recipes = load_selected_recipes(recipes_file, (), None, None)

    if not recipes:
        click.echo("No recipes found.")
        return

    click.echo(f"\n{len(recipes)} recipe(s):\n")
    for i, recipe in enumerate(recipes, 1):
        extra = f", {recipe.cook_time_minutes} min" if recipe.cook_time_minutes else ""
        click.echo(f"{i:2}. {recipe.title} ({len(recipe.ingredients)} ingredients{extra})")


@cli.command("list")
@recipe_source_options
@click.option("--interactive", "-i", is_flag=True, help="Tick off items in an interactive checklist")
def list_cmd(
    recipes_file: str | None,
    titles: tuple[str, ...],
    input_text: str | None,
    title: str | None,
    interactive: bool,
):
    """Build the shopping list for the selected recipes.

    Examples:

    \b
        enplace list -f recipes.json
        enplace list -f recipes.json -r "Chicken Stir Fry" -r "Pad Thai"
        enplace list --text "2 eggs; 1 cup milk; 1 lb chicken breast, cubed"
        enplace list -f recipes.json -i
    """
    recipes = load_selected_recipes(recipes_file, titles, input_text, title)
    groups = aggregate(recipes)
    checklist = load_checklist(CHECKLIST_FILE)

    if interactive:
        from .tui import interactive_checklist

        list_title = recipes[0].title if len(recipes) == 1 else "Shopping List"
        result = interactive_checklist(groups, checklist, list_title)
        if not result.confirmed:
            click.echo("Cancelled.")
            return

        checklist.checked = result.checked
        try:
            save_checklist(checklist, CHECKLIST_FILE)
        except ChecklistError as e:
            fail(str(e))

    display_shopping_list(groups, recipes, checklist)


@cli.command("export")
@click.argument("output", type=click.Path(dir_okay=False))
@recipe_source_options
@click.option(
    "--format",
    "-F",
    "fmt",
    type=click.Choice(["txt", "md", "json", "pdf"]),
    help="Output format (default: from file extension)",
)
@click.option("--no-checks", is_flag=True, help="Ignore saved check marks")
def export_cmd(
    output: str,
    recipes_file: str | None,
    titles: tuple[str, ...],
    input_text: str | None,
    title: str | None,
    fmt: str | None,
    no_checks: bool,
):
    """Export the shopping list to a file.

    Examples:

    \b
        enplace export list.md -f recipes.json
        enplace export list.pdf -f recipes.json -r "Pad Thai"
        enplace export list.txt --text "2 eggs; 1 cup milk"
    """
    recipes = load_selected_recipes(recipes_file, titles, input_text, title)
    groups = aggregate(recipes)
    checklist = None if no_checks else load_checklist(CHECKLIST_FILE)
    list_title = title or (recipes[0].title if len(recipes) == 1 else "Shopping List")

    try:
        used = export_shopping_list(
            groups,
            output,
            title=list_title,
            recipe_count=len(recipes),
            checklist=checklist,
            format=fmt,
        )
    except (ImportError, ValueError, OSError) as e:
        fail(str(e))

    click.echo(f"✓ Exported {sum(len(g.items) for g in groups)} items to {output} ({used})")


# ============================================================================
# Checklist Commands
# ============================================================================


@cli.group()
def checklist():
    """Manage check marks for items you have already picked up."""
    pass


def _update_checks(items: tuple[str, ...], groups: list[ShoppingCategory], checked: bool) -> None:
    state = load_checklist(CHECKLIST_FILE)
    missing = []

    for text in items:
        item = find_item(groups, text)
        if item is None:
            missing.append(text)
            continue
        if checked:
            state.check(item)
        else:
            state.uncheck(item)
        click.echo(f"  {'✓' if checked else '○'} {item}")

    try:
        save_checklist(state, CHECKLIST_FILE)
    except ChecklistError as e:
        fail(str(e))

    if missing:
        fail(f"Not on the shopping list: {', '.join(missing)}")


@checklist.command("check")
@click.argument("items", nargs=-1, required=True)
@recipe_source_options
def checklist_check(
    items: tuple[str, ...],
    recipes_file: str | None,
    titles: tuple[str, ...],
    input_text: str | None,
    title: str | None,
):
    """Check off items by name.

    Example:

    \b
        enplace checklist check garlic "olive oil" -f recipes.json
    """
    recipes = load_selected_recipes(recipes_file, titles, input_text, title)
    _update_checks(items, aggregate(recipes), checked=True)


@checklist.command("uncheck")
@click.argument("items", nargs=-1, required=True)
@recipe_source_options
def checklist_uncheck(
    items: tuple[str, ...],
    recipes_file: str | None,
    titles: tuple[str, ...],
    input_text: str | None,
    title: str | None,
):
    """Remove check marks from items."""
    recipes = load_selected_recipes(recipes_file, titles, input_text, title)
    _update_checks(items, aggregate(recipes), checked=False)


@checklist.command("status")
@recipe_source_options
def checklist_status(
    recipes_file: str | None,
    titles: tuple[str, ...],
    input_text: str | None,
    title: str | None,
):
    """Show checklist progress for the selected recipes."""
    recipes = load_selected_recipes(recipes_file, titles, input_text, title)
    groups = aggregate(recipes)
    state = load_checklist(CHECKLIST_FILE)

    done, total = state.progress(groups)
    click.echo(f"Checked: {done}/{total}")
    if state.updated_at:
        click.echo(f"Last updated: {state.updated_at.strftime('%Y-%m-%d %H:%M')}")


@checklist.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def checklist_reset(yes: bool):
    """Uncheck all items."""
    if not yes:
        if not click.confirm("Reset all check marks?"):
            click.echo("Cancelled.")
            return

    state = load_checklist(CHECKLIST_FILE)
    state.reset()
    try:
        save_checklist(state, CHECKLIST_FILE)
    except ChecklistError as e:
        fail(str(e))
    click.echo("✓ Checklist reset")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
