"""
Basic usage examples for the defaulted package.

Values resolve from defaults, then the override layer selected by
ENVIRONMENT, then the process environment.
"""
from defaulted import (
    MappingSource,
    MissingKeyError,
    SerializationError,
    build_config,
    build_secrets,
)


# =============================================================================
# Example 1: Defaults with per-environment overrides
# =============================================================================
def example1_environment_overrides() -> None:
    """
    The layer named by ENVIRONMENT replaces defaults; environment values
    replace both and are coerced to the type of the default.
    """
    source = MappingSource({"ENVIRONMENT": "test", "DEBUG": "1"})
    config = build_config(
        {"MY_HOST": "example.com", "PORT": 1234, "DEBUG": False},
        {"prod": {"PORT": 80}, "test": {"PORT": 8080}},
        source=source,
    )
    print(f"Example 1 - {config.MY_HOST}:{config.PORT} debug={config.DEBUG} env={config.ENVIRONMENT}")
    # Output: "example.com:8080 debug=True env=test"
    print(f"Example 1 - JSON: {config.to_json()}")


# =============================================================================
# Example 2: Secrets with a development fallback
# =============================================================================
def example2_secrets() -> None:
    """
    Secrets are mandatory strings. A layer can supply a harmless value for
    local development, and the object refuses to be serialized.
    """
    source = MappingSource({"ENVIRONMENT": "dev"})
    secrets = build_secrets(["API_TOKEN"], {"dev": {"API_TOKEN": "local-dev-token"}}, source=source)
    print(f"Example 2 - token length: {len(secrets.API_TOKEN)}")
    print(f"Example 2 - repr: {secrets!r}")
    # Output: "ResolvedSecrets({'API_TOKEN': '[REDACTED]'})"

    try:
        secrets.to_json()
    except SerializationError as e:
        print(f"Example 2 - {e}")


# =============================================================================
# Example 3: Fail fast at startup
# =============================================================================
def example3_missing() -> None:
    """A layer that unsets a default forces the environment to provide it."""
    try:
        build_config(
            {"DATABASE_URL": "sqlite://"},
            {"prod": {"DATABASE_URL": None}},
            source=MappingSource({"ENVIRONMENT": "prod"}),
        )
    except MissingKeyError as e:
        print(f"Example 3 - {e}")
        # Output: 'Required keys not present in env: "DATABASE_URL"'


if __name__ == "__main__":
    example1_environment_overrides()
    example2_secrets()
    example3_missing()
