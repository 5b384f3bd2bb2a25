from pydantic_settings import BaseSettings

from .yaml_config import get_defaults

_defaults = get_defaults()


class Settings(BaseSettings):
    model_config = {"env_prefix": "HIPSTER_DOMAINS_"}

    # Inputs
    tld_url: str = _defaults.get("tld_url", "https://data.iana.org/TLD/tlds-alpha-by-domain.txt")
    words_path: str = _defaults.get("words_path", "/usr/share/dict/words")
    http_timeout: float = _defaults.get("http_timeout", 30.0)

    # Worker pool
    workers: int = _defaults.get("workers", 100)
    queue_size: int = _defaults.get("queue_size", 1)

    # DNS
    dns_lifetime: float = _defaults.get("dns_lifetime", 10.0)

    # Candidate generation
    allow_empty_label: bool = _defaults.get("allow_empty_label", False)
    deduplicate: bool = _defaults.get("deduplicate", True)


settings = Settings()
