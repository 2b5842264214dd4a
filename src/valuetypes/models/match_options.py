from __future__ import annotations

from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict


class MatchOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # None and UNDEFINED match any descriptor when set.
    optional: bool = False


MatchOptionsLike = Union[MatchOptions, Mapping[str, Any], None]


def coerce_match_options(options: MatchOptionsLike) -> MatchOptions:
    if options is None:
        return MatchOptions()
    if isinstance(options, MatchOptions):
        return options
    if isinstance(options, Mapping):
        options = dict(options)
    return MatchOptions.model_validate(options)
