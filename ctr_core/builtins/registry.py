"""Built-in ``registry`` commands operating on the local credential store."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser, Namespace

from ctr_core.api import CtrAbstractCommand, ctrcommand
from ctr_core.config import SettingsResolver
from ctr_core.credentials import CredentialStore, FileCredentialStore
from ctr_core.output import TableOutput
from ctr_core.resource import RegistryResource, encode_registries, is_valid_host_reference

logger = logging.getLogger(__name__)

LIST_HEADER = ["HOSTNAME", "USERNAME", "MODIFIED", "CREATED"]


class _StoreAwareCommand(CtrAbstractCommand):
    """Commands that read or write the registry credential store."""

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--store",
            dest="store_path",
            default=None,
            help="Path of the registry store file (default: user data dir).",
        )
        parser.add_argument("--debug", action="store_true", help="Enable debug logging.")

    def _store(self, args: Namespace) -> CredentialStore:
        resolver = SettingsResolver(overrides={"store_path": getattr(args, "store_path", None)})
        path = resolver.store_path()
        logger.debug("using credential store %s", path)
        return FileCredentialStore(path)


@ctrcommand(name="list", group="registry", aliases=("ls",))
class RegistryListCommand(_StoreAwareCommand):
    """List image registry logins."""

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        super().configure(parser)
        parser.add_argument(
            "--format",
            choices=["table", "json"],
            default="table",
            help="Format of the output.",
        )
        parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Only output the registry name.",
        )

    def run(self, args: Namespace) -> int:
        records = self._store(args).list()
        registries = [
            RegistryResource.from_registry_info(info)
            for info in sorted(records, key=lambda item: item.hostname)
        ]
        if args.format == "json":
            print(encode_registries(registries))
            return 0
        if args.quiet:
            for registry in registries:
                print(registry.name)
            return 0
        rows = [LIST_HEADER, *(registry.as_row() for registry in registries)]
        print(TableOutput(rows).format())
        return 0


@ctrcommand(name="add", group="registry")
class RegistryAddCommand(_StoreAwareCommand):
    """Record a registry login for HOSTNAME."""

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        super().configure(parser)
        parser.add_argument("hostname", help="Registry host, e.g. docker.io or localhost:5000.")
        parser.add_argument("--username", "-u", default="", help="Login user name.")
        parser.add_argument(
            "--no-validate",
            action="store_false",
            dest="validate",
            help="Store the hostname even if it is not a valid host reference.",
        )

    def run(self, args: Namespace) -> int:
        hostname = args.hostname
        if args.validate and not is_valid_host_reference(hostname):
            print(f"[ctr:registry] invalid registry hostname: {hostname!r}", file=sys.stderr)
            return 1
        store = self._store(args)
        existed = store.get(hostname) is not None
        record = store.save(hostname, args.username)
        action = "updated" if existed else "added"
        print(f"[ctr:registry] {action} {record.hostname}")
        return 0


@ctrcommand(name="remove", group="registry", aliases=("rm",))
class RegistryRemoveCommand(_StoreAwareCommand):
    """Forget the registry login for HOSTNAME."""

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        super().configure(parser)
        parser.add_argument("hostname")

    def run(self, args: Namespace) -> int:
        if not self._store(args).remove(args.hostname):
            print(f"[ctr:registry] no login for {args.hostname}", file=sys.stderr)
            return 1
        print(f"[ctr:registry] removed {args.hostname}")
        return 0


@ctrcommand(name="check", group="registry")
class RegistryCheckCommand(CtrAbstractCommand):
    """Check whether each HOSTNAME is a valid registry host reference."""

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        parser.add_argument("hostnames", nargs="+", metavar="HOSTNAME")
        parser.add_argument("--debug", action="store_true", help="Enable debug logging.")

    def run(self, args: Namespace) -> int:
        code = 0
        for hostname in args.hostnames:
            valid = is_valid_host_reference(hostname)
            print(f"{hostname}\t{'valid' if valid else 'invalid'}")
            if not valid:
                code = 1
        return code
