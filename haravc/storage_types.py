"""Parameter types of the credential storage contract."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from haravc.common import TxParams


@dataclass(frozen=True)
class SetAddressParams(TxParams):
    address: Any

    def to_args(self) -> list[Any]:
        return [self.address]