"""Publish a secret as a shared Secure Note, one `op` call after the other.

Each step either returns what the next one needs or raises `EarlyExit`. Any
other exception (missing `op` binary, invalid JSON, no clipboard) is fatal and
propagates. Nothing is retried and nothing is rolled back: an item created
before a failed share stays in the vault.
"""
import json
import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Callable, Iterator, NewType, Optional, TextIO, Tuple

from share1password import clipboard
from share1password.config import Config
from share1password.note import extract_item_id, fill_note
from share1password.op import ItemId, OnePassword, VaultName
from share1password.utils import item_title, scoped_tempfile

logger = logging.getLogger(__name__)

Secret = NewType("Secret", str)
ShareLink = NewType("ShareLink", str)


class EarlyExit(Exception):
    """Stop the run and show `lines` on stderr. Not a crash."""

    def __init__(self: "EarlyExit", *lines: str) -> None:
        super().__init__(*lines)
        self.lines: Tuple[str, ...] = lines


def read_secret(stream: TextIO) -> Secret:
    # Bytes are taken as UTF-8 and line endings are kept, whatever the platform.
    buffer = getattr(stream, "buffer", None)
    text = buffer.read().decode("utf-8") if buffer is not None else stream.read()
    if not text.strip():
        raise EarlyExit(
            "No input text provided. Please provide text via stdin.",
            "Usage example: cat .env | share-1password",
        )
    return Secret(text)


def validate_session(op: OnePassword) -> None:
    if not op.is_signed_in():
        raise EarlyExit(
            "1Password CLI is not signed in. Please sign in first using 'op signin'."
        )


def resolve_vault(op: OnePassword, vault: VaultName, out: TextIO) -> None:
    if op.vault_exists(vault):
        return
    print(f"Vault '{vault}' does not exist, creating it...", file=out)
    created = op.create_vault(vault)
    if not created.ok:
        raise EarlyExit(f"Error creating vault '{vault}'.", created.stderr)


@contextmanager
def build_item(op: OnePassword, secret: Secret) -> Iterator[Path]:
    """Yield the path of a filled-in Secure Note template."""
    with scoped_tempfile(secret + "\n") as secret_path:
        response = op.get_template()
        if not response.ok:
            raise EarlyExit("Error getting Secure Note template.")
        template = json.loads(response.stdout)
        with secret_path.open(encoding="utf-8", newline="") as handle:
            content = handle.read()
        with scoped_tempfile(json.dumps(fill_note(template, content))) as path:
            yield path


def publish_item(
    op: OnePassword, template: Path, vault: VaultName, title: str
) -> ItemId:
    created = op.create_item(title, vault, template)
    if not created.ok:
        raise EarlyExit("Error creating the item in 1Password.", created.stderr)
    item_id = extract_item_id(json.loads(created.stdout))
    if item_id is None:
        raise EarlyExit("Failed to get item ID.")
    logger.debug("Created item %s in vault %r", item_id, vault)
    return item_id


def share_item(op: OnePassword, item_id: ItemId, config: Config) -> ShareLink:
    shared = op.share_item(item_id, config.vault, config.expires_in, config.emails)
    if not shared.ok:
        raise EarlyExit("Error sharing the item.", shared.stderr)
    return ShareLink(shared.stdout)


def publish_link(link: ShareLink, copy: Callable[[str], None], out: TextIO) -> None:
    copy(link)
    print("Link copied to clipboard:", file=out)
    print(link, file=out)


@dataclass
class Environment:
    """Everything a run reads from or writes to outside of `op`."""

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)
    copy: Callable[[str], None] = clipboard.copy
    cwd: Optional[Path] = None
    today: Optional[date] = None


def run(config: Config, op: OnePassword, env: Optional[Environment] = None) -> int:
    env = env or Environment()
    try:
        secret = read_secret(env.stdin)
        validate_session(op)
        resolve_vault(op, config.vault, env.stdout)
        with build_item(op, secret) as template:
            title = item_title(
                (env.cwd or Path.cwd()).name, env.today or date.today()
            )
            item_id = publish_item(op, template, config.vault, title)
        link = share_item(op, item_id, config)
        publish_link(link, env.copy, env.stdout)
    except EarlyExit as stop:
        for line in stop.lines:
            print(line, file=env.stderr)
    # Soft failures still exit with 0, callers have to look at stderr.
    return 0
