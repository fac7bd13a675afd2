import pytest

from particlesim.cli import (
    check_priority_queue,
    main,
    parse_particles,
    read_particles,
    run_simulation,
)

SAMPLE = """2
0.25 0.5 0.01 -0.02 0.05 0.5 255 0 0
0.75 0.5 -0.01 0.02 0.05 0.5 0 255 255
"""


def test_parse_particles_reads_fields():
    particles = parse_particles(SAMPLE)
    assert len(particles) == 2
    first, second = particles
    assert first.r == (0.25, 0.5)
    assert first.v == (0.01, -0.02)
    assert first.radius == 0.05
    assert first.mass == 0.5
    assert first.color == (1.0, 0.0, 0.0)
    assert second.color == (0.0, 1.0, 1.0)
    assert first.count == 0 and second.count == 0


def test_parse_particles_zero_count():
    assert parse_particles("0\n") == []


def test_parse_particles_empty_text():
    assert parse_particles("   \n") == []


def test_parse_particles_too_few_values():
    with pytest.raises(ValueError):
        parse_particles("2\n0.1 0.2 0.0 0.0 0.01 0.5 1 2 3\n")


def test_parse_particles_non_numeric():
    with pytest.raises(ValueError):
        parse_particles("1\n0.1 x 0.0 0.0 0.01 0.5 1 2 3\n")


def test_parse_particles_bad_count():
    with pytest.raises(ValueError):
        parse_particles("many\n")


def test_parse_particles_negative_count():
    with pytest.raises(ValueError):
        parse_particles("-1\n")


def test_read_particles_missing_file(tmp_path):
    assert read_particles(tmp_path / "missing.txt") == []


def test_read_particles_matches_parse(tmp_path):
    path = tmp_path / "particles.txt"
    path.write_text(SAMPLE)
    from_file = read_particles(path)
    from_text = parse_particles(SAMPLE)
    assert [(p.r, p.v, p.radius, p.mass, p.color) for p in from_file] == [
        (p.r, p.v, p.radius, p.mass, p.color) for p in from_text
    ]


@pytest.mark.parametrize("seed", [0, 1, 42])
def test_check_priority_queue_has_no_mismatches(seed):
    assert check_priority_queue(1000, 1500, seed) == []


def test_check_priority_queue_empty_range():
    assert check_priority_queue(5, 5, 0) == []


def test_run_simulation_without_particles(tmp_path, capsys):
    assert run_simulation(tmp_path / "missing.txt", 10.0, 10.0) is False
    assert "No particles" in capsys.readouterr().out


def test_main_priority_queue_check(capsys):
    assert main(["--test-queue", "--seed", "3"]) == 0
    assert "Successful test..." in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "No particles" in capsys.readouterr().out


def test_main_prompts_for_file(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: str(tmp_path / "none.txt"))
    assert main([]) == 1
    assert "No particles" in capsys.readouterr().out


def test_main_rejects_non_positive_frequency(tmp_path):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "x.txt"), "--frequency", "0"])
    assert info.value.code == 2