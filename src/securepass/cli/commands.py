import click
import logging
import time
from functools import update_wrapper, wraps
from pathlib import Path

from securepass.constants import DEFAULT_FILENAME, LOG_FILE, SETTINGS_FILE, STORAGE_DIRECTORY
from securepass.core.errors import PasswordManagerError, StoreInitError
from securepass.core.password import PasswordEntry
from securepass.core.report import collect_statistics
from securepass.core.strength import recommendations, strength_label
from securepass.core.vault import PasswordStore
from securepass.cli.settings import Settings

RULE = "=" * 80
TABLE_RULE = "-" * 80
MASK = "********"


class Services:
    """The store, generator and settings shared by every command."""

    def __init__(self, store: PasswordStore, generator, settings: Settings):
        self.store = store
        self.generator = generator
        self.settings = settings

    @classmethod
    def create(cls, storage_dir: Path, filename: str) -> "Services":
        store = PasswordStore(storage_dir, filename)
        settings = Settings(store.file_path.parent / SETTINGS_FILE)
        return cls(store, settings.build_generator(), settings)


def pass_services(f):
    """Decorator that builds the services on first use and passes them to the command."""
    @click.pass_context
    def new_func(ctx, *args, **kwargs):
        options = ctx.find_object(dict)
        if options.get('services') is None:
            try:
                options['services'] = Services.create(options['storage_dir'], options['filename'])
            except (StoreInitError, ValueError) as e:
                click.echo(f"Failed to start Password Manager: {e}")
                ctx.exit(1)
        return ctx.invoke(f, options['services'], *args, **kwargs)
    return update_wrapper(new_func, f)


def report_errors(f):
    """Decorator that reports password manager failures instead of raising them."""
    @wraps(f)
    def wrapped(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except PasswordManagerError as e:
            logging.warning(f"{f.__name__} failed: {e}")
            click.echo(f"Error: {e}")
    return wrapped


def truncate(text: str, length: int) -> str:
    if len(text) <= length:
        return text
    return text[:length - 3] + "..."


def echo_entry(services: Services, entry: PasswordEntry, reveal: bool) -> None:
    click.echo(f"Name: {entry.name}")
    click.echo(f"Password: {entry.password if reveal else MASK}")
    click.echo(f"Length: {entry.password_length} characters")
    click.echo(f"Special Characters: {'Yes' if entry.has_special_chars else 'No'}")
    click.echo(f"Strength: {strength_label(services.generator.strength(entry.password))}")
    click.echo(f"Created: {entry.formatted_timestamp}")


# --- Actions shared by the commands and the interactive menu ---

@report_errors
def generate_and_save(services, include_special, name=None, length=None, assume_yes=False):
    click.echo("--- Generate and Save Password ---")
    click.echo(f"Special characters: {'Enabled' if include_special else 'Disabled'}")
    if name is None:
        name = click.prompt("Enter a name for this password", default="", show_default=False)
    name = name.strip()
    if not name:
        click.echo("Error: Password name cannot be empty.")
        return
    if services.store.contains(name):
        click.echo("Error: A password with this name already exists.")
        return

    password = services.generator.generate(length, include_special)
    entry = PasswordEntry(name, password, include_special)
    click.echo("\nGenerated Password Details:")
    echo_entry(services, entry, reveal=True)

    if assume_yes or click.confirm("\nSave this password?"):
        services.store.save(entry)
        click.echo("Password saved successfully!")
    else:
        click.echo("Password not saved.")


def list_passwords(services, reveal=False):
    click.echo("--- All Stored Passwords ---")
    entries = services.store.all()
    if not entries:
        click.echo("No passwords stored yet.")
        return
    click.echo(f"Total passwords: {len(entries)}\n")
    click.echo(f"{'#':<4} {'Name':<20} {'Password':<25} {'Length':<8} {'Special Chars':<15} {'Created':<20}")
    click.echo(TABLE_RULE)
    for index, entry in enumerate(entries, start=1):
        click.echo(
            f"{index:<4} {truncate(entry.name, 20):<20} "
            f"{entry.password if reveal else MASK:<25} {entry.password_length:<8} "
            f"{'Yes' if entry.has_special_chars else 'No':<15} {entry.formatted_timestamp:<20}"
        )


def search_password(services, name):
    click.echo("--- Search Password by Name ---")
    name = name.strip()
    if not name:
        click.echo("Search name cannot be empty.")
        return
    entry = services.store.find_by_name(name)
    if entry is None:
        click.echo(f"No password found with the name: {name}")
        return
    click.echo("\nPassword found:")
    echo_entry(services, entry, reveal=False)
    if click.confirm("Show password?"):
        click.echo(f"Password: {entry.password}")


@report_errors
def export_passwords(services, filename=None):
    click.echo("--- Export Passwords ---")
    if services.store.count == 0:
        click.echo("No passwords to export.")
        return
    if not filename or not filename.strip():
        filename = f"password_export_{int(time.time() * 1000)}.txt"
        click.echo(f"Using default filename: {filename}")
    services.store.export_to(Path(filename.strip()))
    click.echo(f"Passwords exported successfully to: {filename.strip()}")


def analyze_password(services, password):
    click.echo("--- Password Strength Analyzer ---")
    if not password:
        click.echo("Password cannot be empty.")
        return
    score = services.generator.strength(password)
    click.echo("\nPassword Analysis Results:")
    click.echo(f"Length: {len(password)} characters")
    click.echo(f"Strength Score: {score}/100")
    click.echo(f"Strength Level: {strength_label(score)}")
    click.echo("\nRecommendations:")
    for advice in recommendations(score):
        click.echo(f"- {advice}")


def show_statistics(services):
    click.echo("--- Application Statistics ---")
    stats = collect_statistics(services.store.all(), services.generator.strength)
    click.echo(f"Total passwords stored: {stats.total}")
    click.echo(f"Storage file: {services.store.file_path.resolve()}")
    if stats.total:
        click.echo(f"Passwords with special characters: {stats.with_special_chars}")
        click.echo(f"Passwords without special characters: {stats.without_special_chars}")
        click.echo(f"Average password length: {stats.average_length:.1f} characters")
        click.echo("\nPassword Strength Distribution:")
        for label, count in stats.distribution.items():
            click.echo(f"{label}: {count}")
    click.echo("\nGenerator Settings:")
    click.echo(f"Min Length: {services.generator.min_length}")
    click.echo(f"Max Length: {services.generator.max_length}")


@report_errors
def change_lengths(services, min_length=None, max_length=None):
    generator = services.generator
    if min_length is not None and max_length is not None:
        generator.configure(min_length, max_length)
    elif min_length is not None:
        generator.min_length = min_length
    elif max_length is not None:
        generator.max_length = max_length
    else:
        return
    try:
        services.settings.update_from(generator)
    except OSError as e:
        click.echo(f"Error: could not save settings: {e}")
        return
    click.echo(f"Length range updated to: {generator.min_length}-{generator.max_length}")


def show_settings(services):
    click.echo("--- Application Settings ---")
    click.echo("Current Settings:")
    click.echo(f"1. Minimum password length: {services.generator.min_length}")
    click.echo(f"2. Maximum password length: {services.generator.max_length}")
    click.echo(f"3. Storage location: {services.store.file_path.resolve()}")


# --- Commands ---

@click.group(invoke_without_command=True)
@click.option('--storage-dir', type=click.Path(file_okay=False, path_type=Path),
              default=STORAGE_DIRECTORY, show_default=True, help='Directory holding the password file.')
@click.option('--file', 'filename', default=DEFAULT_FILENAME, show_default=True,
              help='Name of the password file inside the storage directory.')
@click.pass_context
def cli(ctx, storage_dir, filename):
    """Secure Password Manager

    Generate strong passwords and keep them in a plain text file.
    Run without a command to start the interactive menu.
    """
    ctx.ensure_object(dict)
    ctx.obj.update(storage_dir=storage_dir, filename=filename, services=None)
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


@cli.command()
@pass_services
@click.option('--special/--no-special', default=False, help='Include special characters.')
@click.option('--length', type=int, default=None, help='Exact length. If omitted, a length in the configured range is used.')
@click.option('--name', default=None, help='Name for the new entry. Prompted if omitted.')
@click.option('--yes', 'assume_yes', is_flag=True, help='Save without asking for confirmation.')
def generate(services, special, length, name, assume_yes):
    """Generate a password and save it under a name."""
    generate_and_save(services, special, name=name, length=length, assume_yes=assume_yes)


@cli.command()
@pass_services
@click.option('--reveal', is_flag=True, help='Show passwords in clear text.')
def ls(services, reveal):
    """List all stored passwords."""
    list_passwords(services, reveal=reveal)


@cli.command()
@pass_services
@click.argument('name')
def show(services, name):
    """Look up a stored password by name (case-insensitive)."""
    search_password(services, name)


@cli.command()
@pass_services
@click.argument('filename', required=False)
def export(services, filename):
    """Export every password with its strength to FILENAME."""
    export_passwords(services, filename)


@cli.command()
@pass_services
def analyze(services):
    """Score the strength of a password."""
    password = click.prompt("Enter a password to analyze", hide_input=True, default="", show_default=False)
    analyze_password(services, password)


@cli.command()
@pass_services
def stats(services):
    """Show statistics about the stored passwords."""
    show_statistics(services)


@cli.command()
@pass_services
@click.option('--min-length', type=int, default=None, help='New minimum length (4-128).')
@click.option('--max-length', type=int, default=None, help='New maximum length (4-128).')
def settings(services, min_length, max_length):
    """Show or change the generator length range."""
    change_lengths(services, min_length, max_length)
    show_settings(services)


@cli.command()
@pass_services
@click.option('--delete-file', is_flag=True, help='Also delete the password file.')
@click.option('--yes', 'assume_yes', is_flag=True, help='Do not ask for confirmation.')
@report_errors
def clear(services, delete_file, assume_yes):
    """Remove all stored passwords."""
    if not assume_yes and not click.confirm("Remove all stored passwords?"):
        click.echo("Nothing removed.")
        return
    services.store.clear(delete_file)
    click.echo("All passwords removed." + (" Password file deleted." if delete_file else ""))


@cli.command()
@pass_services
@report_errors
def reload(services):
    """Re-read the password file from disk."""
    services.store.reload()
    click.echo(f"Reloaded {services.store.count} passwords from {services.store.file_path}")


MENU_OPTIONS = (
    "Generate and Save Password (without special characters)",
    "Generate and Save Password (with special characters)",
    "View All Stored Passwords",
    "Search for Password by Name",
    "Export Passwords to File",
    "Password Strength Analyzer",
    "Application Statistics",
    "Settings",
    "Exit Application",
)


def settings_menu(services):
    show_settings(services)
    click.echo("\nSettings modification options:")
    click.echo("1. Change minimum password length")
    click.echo("2. Change maximum password length")
    click.echo("3. Return to main menu")
    choice = click.prompt("Select option (1-3)", type=click.IntRange(1, 3))
    if choice == 1:
        change_lengths(services, min_length=click.prompt("Enter new minimum length (4-128)", type=int))
    elif choice == 2:
        change_lengths(services, max_length=click.prompt("Enter new maximum length (must be >= min length)", type=int))


@cli.command()
@pass_services
def menu(services):
    """Start the interactive menu."""
    click.echo(RULE)
    click.echo("SECURE PASSWORD MANAGER".center(80).rstrip())
    click.echo(RULE)
    click.echo(f"Storage location: {services.store.file_path.resolve()}")
    click.echo(f"Current passwords stored: {services.store.count}\n")

    while True:
        click.echo(RULE)
        click.echo("MAIN MENU".center(80).rstrip())
        click.echo(RULE)
        for number, label in enumerate(MENU_OPTIONS, start=1):
            click.echo(f"{number}. {label}")
        click.echo(RULE)
        choice = click.prompt(f"Please select an option (1-{len(MENU_OPTIONS)})",
                              type=click.IntRange(1, len(MENU_OPTIONS)))
        click.echo()
        if choice == 1:
            generate_and_save(services, False)
        elif choice == 2:
            generate_and_save(services, True)
        elif choice == 3:
            list_passwords(services, reveal=True)
        elif choice == 4:
            search_password(services, click.prompt("Enter the password name to search for", default="", show_default=False))
        elif choice == 5:
            export_passwords(services, click.prompt("Enter filename for export", default="", show_default=False))
        elif choice == 6:
            analyze_password(services, click.prompt("Enter a password to analyze", hide_input=True, default="", show_default=False))
        elif choice == 7:
            show_statistics(services)
        elif choice == 8:
            settings_menu(services)
        else:
            click.echo("--- Exit Application ---")
            click.echo("Thank you for using the Secure Password Manager!")
            logging.info("Password Manager shutdown completed")
            return
        click.pause()


def main():
    logging.basicConfig(filename=LOG_FILE, level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    cli()


if __name__ == '__main__':
    main()
