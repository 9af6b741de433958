"""Runtime settings for the dkmap CLI.

Priority chain (highest to lowest):
  1. Init kwargs : CLI flags passed by Click
  2. Env vars    : ``DKMAP_*`` prefix
  3. Code defaults

The mappings file itself is not configuration of this tool; it is the
input being checked, so it never feeds these settings.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings

from dkmap.domain.parse import ParsePolicy


class DkSettings(BaseSettings):
    """Unified settings for the dkmap CLI, frozen after construction.

    Stored on the :class:`~dkmap.commands._context.AppContext` at the CLI
    root level.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DKMAP_",
    }

    # --- Output flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- Parse policy ---
    require_microphone: bool = False
    strict_filename: bool = False

    @property
    def policy(self) -> ParsePolicy:
        return ParsePolicy(
            require_microphone=self.require_microphone,
            strict_filename=self.strict_filename,
        )

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> DkSettings:
        """Construct settings from a CLI invocation.

        Flags left at False are dropped so ``DKMAP_*`` env vars can
        still switch them on.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
