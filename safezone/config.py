"""Server settings read from the environment."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

_PORT_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class ServerConfig:
    """Port to listen on and the database to use."""

    port: int
    database_url: str

    @classmethod
    def load(cls) -> ServerConfig:
        """Read settings, loading a ``.env`` file if one is found."""
        load_dotenv(find_dotenv(usecwd=True))

        raw_port = os.environ.get("ACTIX_PORT")
        if raw_port is None:
            raise RuntimeError("Please set env: ACTIX_PORT")
        if not _PORT_PATTERN.fullmatch(raw_port) or int(raw_port) > 0xFFFF:
            raise ValueError("Invalid ACTIX_PORT")

        database_url = os.environ.get("CLIENT_DB_URL")
        if database_url is None:
            raise RuntimeError("Please set env: DB_FOR_CLIENT_URL")

        return cls(port=int(raw_port), database_url=database_url)

    def socket_addr(self) -> tuple[str, int]:
        """Address to bind: every interface on the configured port."""
        return ("0.0.0.0", self.port)