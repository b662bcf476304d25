from __future__ import annotations

import sys
from importlib.metadata import version as dist_version
from pathlib import Path
from typing import Optional

import typer

from playfair.classical import PlayfairCipher, strip_fillers
from playfair.core.square import build_key_square
from playfair.core.utils import normalize_text

app = typer.Typer(
    help="Playfair CLI: encrypt and decrypt text with a keyword-derived 5x5 square.",
    invoke_without_command=True,
)

_CIPHER = PlayfairCipher()


def _verbose(ctx: typer.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("verbose"))


def _log(ctx: typer.Context, msg: str) -> None:
    if _verbose(ctx):
        print(msg, file=sys.stderr)


def _show_version(value: bool):
    if value:
        typer.echo(dist_version("playfair-cli"))
        raise typer.Exit()


@app.callback()
def _init(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Log the key square and digram counts to stderr."),
    version: bool = typer.Option(
        False, "--version", "-v", callback=_show_version, is_eager=True, help="Show the version and exit."
    ),
):
    ctx.obj = {"verbose": verbose}
    # No subcommand: fall through to the menu
    if ctx.invoked_subcommand is None:
        interactive(ctx)


def _require_keyword(keyword: str) -> str:
    if not keyword.strip():
        raise typer.BadParameter("Keyword cannot be empty.")
    return keyword


def _run(ctx: typer.Context, mode: str, text: str, keyword: str, *, strip: bool = False) -> str:
    if _verbose(ctx):
        _log(ctx, f"key square:\n{build_key_square(keyword)}")
        _log(ctx, f"{mode}: {len(normalize_text(text))} letters")
        if mode == "decrypt":
            _log(ctx, f"fingerprint: {_CIPHER.fingerprint(text)}")

    try:
        if mode == "encrypt":
            out = _CIPHER.encrypt(text, keyword)
        else:
            out = _CIPHER.decrypt(text, keyword)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    _log(ctx, f"{mode}: {len(out) // 2} digrams")
    if strip:
        out = strip_fillers(out)
    return out

def _write(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def encrypt(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Plaintext to encrypt."),
    keyword: str = typer.Argument(..., help="Keyword for the key square."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file instead of stdout."),
):
    """Encrypt text."""
    result = _run(ctx, "encrypt", text, _require_keyword(keyword))
    if output is not None:
        _write(output, result)
        typer.echo(f"Encrypted content written to: {output}")
    else:
        typer.echo(result)


@app.command()
def decrypt(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
    keyword: str = typer.Argument(..., help="Keyword for the key square."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file instead of stdout."),
    strip: bool = typer.Option(False, "--strip-fillers", help="Drop likely filler letters from the result."),
):
    """Decrypt text. Filler letters stay in unless --strip-fillers is given."""
    result = _run(ctx, "decrypt", text, _require_keyword(keyword), strip=strip)
    if output is not None:
        _write(output, result)
        typer.echo(f"Decrypted content written to: {output}")
    else:
        typer.echo(result)


@app.command("encrypt-file")
def encrypt_file(
    ctx: typer.Context,
    input_file: Path = typer.Argument(..., help="File with plaintext."),
    output_file: Path = typer.Argument(..., help="Where to write ciphertext."),
    keyword: str = typer.Argument(...),
):
    """Encrypt the contents of a file."""
    result = _run(ctx, "encrypt", _read(input_file), _require_keyword(keyword))
    _write(output_file, result)
    typer.echo(f"Encrypted content written to: {output_file}")


@app.command("decrypt-file")
def decrypt_file(
    ctx: typer.Context,
    input_file: Path = typer.Argument(..., help="File with ciphertext."),
    output_file: Path = typer.Argument(..., help="Where to write plaintext."),
    keyword: str = typer.Argument(...),
    strip: bool = typer.Option(False, "--strip-fillers", help="Drop likely filler letters from the result."),
):
    """Decrypt the contents of a file."""
    result = _run(ctx, "decrypt", _read(input_file), _require_keyword(keyword), strip=strip)
    _write(output_file, result)
    typer.echo(f"Decrypted content written to: {output_file}")


@app.command()
def square(keyword: str = typer.Argument("", help="Keyword; empty gives the plain alphabet.")):
    """Print the 5x5 key square for a keyword."""
    typer.echo(str(build_key_square(keyword)))


_MENU = """
Playfair Cipher - Interactive Mode

1) Encrypt text from console
2) Decrypt text from console
3) Encrypt text from file
4) Decrypt text from file
5) Exit
"""


@app.command("interactive")
def interactive(ctx: typer.Context):
    """Menu-driven mode (default when no command is given)."""
    typer.echo(_MENU)
    choice = typer.prompt("Choose an option (1-5)").strip()

    if choice == "5":
        typer.echo("Goodbye!")
        return
    if choice not in {"1", "2", "3", "4"}:
        typer.echo("Invalid option. Please choose between 1-5.", err=True)
        raise typer.Exit(code=1)

    mode = "encrypt" if choice in {"1", "3"} else "decrypt"
    keyword = typer.prompt("Enter the keyword", default="", show_default=False)
    if not keyword.strip():
        typer.echo("Error: Keyword cannot be empty", err=True)
        raise typer.Exit(code=1)

    if choice in {"1", "2"}:
        label = "plaintext" if mode == "encrypt" else "ciphertext"
        text = typer.prompt(f"Enter the {label}", default="", show_default=False)
        if not text.strip():
            typer.echo("Error: Text cannot be empty", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"{mode.capitalize()}ed text:")
        typer.echo(_run(ctx, mode, text, keyword))
        return

    input_path = Path(typer.prompt("Enter input file path"))
    output_path = Path(typer.prompt("Enter output file path"))
    _write(output_path, _run(ctx, mode, _read(input_path), keyword))
    typer.echo(f"{mode.capitalize()}ed content written to: {output_path}")


app.command("i", hidden=True)(interactive)


def main():
    app()


if __name__ == "__main__":
    main()
