import pytest
from defaulted import (
    build_secrets,
    MappingSource,
    AccessError,
    MissingKeyError,
    UnexpectedKeyError,
    InvalidDefaultsError,
    SerializationError,
)


def env(**values):
    return MappingSource(values)


class TestSecrets:
    def test_reads_from_environment(self):
        secrets = build_secrets(["API_KEY", "DB_PASSWORD"], source=env(API_KEY="k", DB_PASSWORD="p"))
        assert secrets.API_KEY == "k"
        assert secrets["DB_PASSWORD"] == "p"

    def test_empty_string_is_present(self):
        secrets = build_secrets(["MY_SECRET"], source=env(MY_SECRET=""))
        assert secrets.MY_SECRET == ""

    def test_values_are_never_coerced(self):
        secrets = build_secrets(["PIN"], source=env(PIN="0042"))
        assert secrets.PIN == "0042"

    def test_missing_secrets(self):
        with pytest.raises(MissingKeyError) as exc:
            build_secrets(["A", "B", "C"], source=env(B="b"))
        assert exc.value.keys == ("A", "C")
        assert exc.value.is_secret is True
        assert 'Required secret keys not present in env: "A","C"' in str(exc.value)

    def test_no_environment_key(self):
        secrets = build_secrets(["A"], source=env(A="a", ENVIRONMENT="prod"))
        assert list(secrets.keys()) == ["A"]
        with pytest.raises(AccessError):
            secrets.ENVIRONMENT

    def test_duplicate_names_collapse(self):
        secrets = build_secrets(("A", "A", "B"), source=env(A="a", B="b"))
        assert list(secrets) == ["A", "B"]


class TestSecretOverrides:
    def test_per_environment_value(self):
        secrets = build_secrets(
            ["API_KEY"],
            {"dev": {"API_KEY": "dev-key"}},
            source=env(ENVIRONMENT="dev"),
        )
        assert secrets.API_KEY == "dev-key"

    def test_environment_beats_override(self):
        secrets = build_secrets(
            ["API_KEY"],
            {"dev": {"API_KEY": "dev-key"}},
            source=env(ENVIRONMENT="dev", API_KEY="real"),
        )
        assert secrets.API_KEY == "real"

    def test_override_outside_environment_is_ignored(self):
        with pytest.raises(MissingKeyError):
            build_secrets(["API_KEY"], {"dev": {"API_KEY": "dev-key"}}, source=env(ENVIRONMENT="prod"))

    def test_unexpected_secret_keys(self):
        with pytest.raises(UnexpectedKeyError) as exc:
            build_secrets(["API_KEY"], {"dev": {"API_KEYS": "x"}}, source=env())
        assert 'Unexpected secret keys in overrides: "API_KEYS"' in str(exc.value)

    def test_rejects_non_string_override(self):
        with pytest.raises(InvalidDefaultsError):
            build_secrets(["PORT"], {"dev": {"PORT": 80}}, source=env())


class TestSecretInputs:
    def test_rejects_bare_string(self):
        with pytest.raises(InvalidDefaultsError):
            build_secrets("API_KEY", source=env(API_KEY="k"))

    def test_rejects_non_string_names(self):
        with pytest.raises(InvalidDefaultsError):
            build_secrets(["A", 1], source=env(A="a"))


class TestSecretSerialization:
    def test_cannot_serialize(self):
        secrets = build_secrets(["MY_SECRET"], source=env(MY_SECRET="hunter2"))
        with pytest.raises(SerializationError, match="Cannot serialize secrets"):
            secrets.to_dict()
        with pytest.raises(SerializationError):
            secrets.to_json()

    def test_repr_is_redacted(self):
        secrets = build_secrets(["MY_SECRET"], source=env(MY_SECRET="hunter2"))
        assert "hunter2" not in repr(secrets)
        assert "[REDACTED]" in repr(secrets)
        assert "hunter2" not in str(secrets)
