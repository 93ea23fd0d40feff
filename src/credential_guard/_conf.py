from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .dto.requirements import (
    PasswordRequirements,
    PlayerNameRequirements,
    UsernameRequirements,
)


class Settings(BaseSettings):
    """
    Requirements applied by the command line front end.

    Every section is optional and falls back to the UGS defaults. Environment
    variables take precedence over the configuration file, e.g.
    ``CREDENTIAL_GUARD_PASSWORD__MIN_LENGTH=12``.
    """

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="CREDENTIAL_GUARD_",
        env_nested_delimiter="__",
    )

    username: UsernameRequirements = Field(default_factory=UsernameRequirements)
    password: PasswordRequirements = Field(default_factory=PasswordRequirements)
    player_name: PlayerNameRequirements = Field(default_factory=PlayerNameRequirements)

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, file_secret_settings, init_settings
