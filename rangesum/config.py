import dataclasses
import logging
import os


DEFAULT_INPUT_URL = "https://share.shub.edu.vn/api/intern-test/input"
DEFAULT_OUTPUT_URL = "https://share.shub.edu.vn/api/intern-test/output"
DEFAULT_TIMEOUT = 30.0


@dataclasses.dataclass(frozen=True)
class Settings:
    """
    Endpoints and transport options.

    Attributes:
        input_url: Endpoint serving the token, data and queries.
        output_url: Endpoint receiving the POSTed answers.
        timeout: Socket timeout in seconds for each request.
        log_level: Name of the logging level used by the entry point.
    """

    input_url: str = DEFAULT_INPUT_URL
    output_url: str = DEFAULT_OUTPUT_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    def __post_init__(self):
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        raw_timeout = environ.get("RANGESUM_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"RANGESUM_TIMEOUT is not a number: {raw_timeout!r}") from None
        return cls(
            input_url=environ.get("RANGESUM_INPUT_URL", DEFAULT_INPUT_URL),
            output_url=environ.get("RANGESUM_OUTPUT_URL", DEFAULT_OUTPUT_URL),
            timeout=timeout,
            log_level=environ.get("RANGESUM_LOG_LEVEL", "INFO").upper(),
        )

    def with_urls(self, input_url=None, output_url=None):
        return dataclasses.replace(
            self,
            input_url=input_url or self.input_url,
            output_url=output_url or self.output_url,
        )
