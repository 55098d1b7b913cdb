"""
Account credentials for the D&H XML dispatcher.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """
    Immutable login details for one D&H account.

    Supplying a drop ship password switches the client into drop ship mode
    for its whole lifetime. Passwords are excluded from repr() so the model
    can be logged.
    """

    model_config = ConfigDict(frozen=True)

    usercode: str
    password: str = Field(repr=False)
    dropship_password: Optional[str] = Field(default=None, repr=False)

    @property
    def dropship_enabled(self) -> bool:
        return bool(self.dropship_password)
