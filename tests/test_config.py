import pytest

from pathsandbox.core.config import SandboxConfig, resolve_config


def test_defaults() -> None:
    config = resolve_config(argv=[], environ={})

    assert config == SandboxConfig()
    assert config.moves == 8
    assert config.end == (19, 19)


def test_environment_values() -> None:
    env = {"PATHSANDBOX_ROWS": "10", "PATHSANDBOX_HEURISTIC": "Octile", "PATHSANDBOX_START": "2, 3"}

    config = resolve_config(argv=[], environ=env)

    assert config.rows == 10
    assert config.heuristic == "octile"
    assert config.start == (2, 3)
    assert config.end == (9, 19)


def test_flags_override_environment() -> None:
    env = {"PATHSANDBOX_MOVES": "8", "PATHSANDBOX_LOG_LEVEL": "debug"}

    config = resolve_config(argv=["--moves=4", "--end=3,4", "--cell-size=12", "stray"], environ=env)

    assert config.moves == 4
    assert config.end == (3, 4)
    assert config.cell_size == 12
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("argv, key", [
    (["--rows=0"], "rows"),
    (["--rows=abc"], "rows"),
    (["--moves=6"], "moves"),
    (["--start=1"], "start"),
    (["--heuristic=chebyshev"], "heuristic"),
    (["--log-level=loud"], "log_level"),
])
def test_bad_values_name_the_setting(argv, key) -> None:
    with pytest.raises(ValueError, match=f"bad value for {key}"):
        resolve_config(argv=argv, environ={})


def test_unknown_flag_rejected() -> None:
    with pytest.raises(ValueError, match="unknown option"):
        resolve_config(argv=["--colour=red"], environ={})
