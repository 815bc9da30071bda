from dataclasses import dataclass


@dataclass(frozen=True)
class FanoutConfig:
    hostnames: tuple[str, ...]
    command_template: str
    placeholder_tag: str
    worker_count: int
    timeout_ms: int

    def __len__(self):
        return len(self.hostnames)

    @property
    def timeout(self) -> float:
        return self.timeout_ms / 1000


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


def validate_config(config: FanoutConfig) -> None:
    if not isinstance(config.hostnames, tuple):
        raise ConfigError(
            f"'hostnames' must be a tuple, got {type(config.hostnames)}"
        )

    for hostname in config.hostnames:
        if not isinstance(hostname, str) or len(hostname) < 1:
            raise ConfigError(f"Invalid hostname: {hostname!r}")

    if not isinstance(config.command_template, str):
        raise ConfigError("The command template should be a string")

    if not isinstance(config.placeholder_tag, str):
        raise ConfigError("The placeholder tag should be a string")

    if isinstance(config.worker_count, bool) or not isinstance(
        config.worker_count, int
    ):
        raise ConfigError(
            f"'workerCount' must be an integer, got {type(config.worker_count)}"
        )

    if config.worker_count < 1:
        raise ConfigError(f"'workerCount' must be > 0, got {config.worker_count}")

    if isinstance(config.timeout_ms, bool) or not isinstance(config.timeout_ms, int):
        raise ConfigError(
            f"'timeoutMillis' must be an integer, got {type(config.timeout_ms)}"
        )

    if config.timeout_ms < 0:
        raise ConfigError(f"'timeoutMillis' must be >= 0, got {config.timeout_ms}")
