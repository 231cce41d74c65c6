"""Thin wrapper around the 1Password `op` command line."""
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, NewType, Optional

logger = logging.getLogger(__name__)

VaultName = NewType("VaultName", str)
ItemId = NewType("ItemId", str)

Runner = Callable[..., subprocess.CompletedProcess]

SECURE_NOTE = "Secure Note"


def _decode(raw: Optional[bytes]) -> str:
    return raw.decode("utf-8", errors="replace") if raw else ""


@dataclass
class Output:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self: "Output") -> bool:
        return self.returncode == 0


def share_args(
    item_id: ItemId, vault: VaultName, expires_in: str, emails: Iterable[str]
) -> List[str]:
    args = ["item", "share", item_id, "--vault", vault, "--expires-in", expires_in]
    for email in emails:
        args += ["--emails", email]
    return args


@dataclass
class OnePassword:
    """Every call blocks until `op` exits. A missing binary raises OSError."""

    binary: str = "op"
    runner: Runner = subprocess.run

    def _run(self: "OnePassword", *args: str, quiet: bool = False) -> Output:
        cmd = [self.binary, *args]
        logger.debug("Running %s", cmd)
        if quiet:
            proc = self.runner(cmd, stdout=subprocess.DEVNULL)
        else:
            proc = self.runner(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        logger.debug("%s exited with %d", cmd[:3], proc.returncode)
        return Output(proc.returncode, _decode(proc.stdout), _decode(proc.stderr))

    def is_signed_in(self: "OnePassword") -> bool:
        return self._run("account", "list", "--format=json", quiet=True).ok

    def vault_exists(self: "OnePassword", vault: VaultName) -> bool:
        return self._run("vault", "get", vault).ok

    def create_vault(self: "OnePassword", vault: VaultName) -> Output:
        return self._run("vault", "create", vault)

    def get_template(self: "OnePassword", kind: str = SECURE_NOTE) -> Output:
        return self._run("item", "template", "get", kind)

    def create_item(
        self: "OnePassword", title: str, vault: VaultName, template: Path
    ) -> Output:
        return self._run(
            "item",
            "create",
            "--title",
            title,
            "--vault",
            vault,
            "--template",
            str(template),
            "--format=json",
        )

    def share_item(
        self: "OnePassword",
        item_id: ItemId,
        vault: VaultName,
        expires_in: str,
        emails: Iterable[str] = (),
    ) -> Output:
        return self._run(*share_args(item_id, vault, expires_in, emails))
