import os
from argparse import Namespace
from dataclasses import dataclass
from typing import Iterable, Tuple

from share1password.op import VaultName

DEFAULT_VAULT = VaultName("Shared Notes")
DEFAULT_EXPIRES_IN = "7d"


def split_emails(values: Iterable[str]) -> Tuple[str, ...]:
    """`--emails "a@x.com b@y.com"` is the same as `--emails a@x.com b@y.com`."""
    return tuple(email for value in values for email in value.split(" ") if email)


@dataclass(frozen=True)
class Config:
    vault: VaultName = DEFAULT_VAULT
    expires_in: str = DEFAULT_EXPIRES_IN
    emails: Tuple[str, ...] = ()
    op_binary: str = "op"

    @staticmethod
    def from_args(args: Namespace) -> "Config":
        return Config(
            vault=VaultName(args.vault),
            expires_in=args.expires_in,
            emails=split_emails(args.emails or ()),
            op_binary=os.environ.get("OP_BIN", "op"),
        )
