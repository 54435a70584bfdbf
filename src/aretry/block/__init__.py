r"""Block strategies performing the wait between attempts."""

from __future__ import annotations

__all__ = ["BaseBlockStrategy", "BlockStrategies", "SleepBlockStrategy"]

from aretry.block.base import BaseBlockStrategy
from aretry.block.factory import BlockStrategies
from aretry.block.sleep import SleepBlockStrategy
