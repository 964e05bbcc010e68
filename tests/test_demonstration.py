from src.config import Settings
from src.demonstration import KEY_TAKEAWAYS, demonstration_lines, run_demonstration


def _sections(lines: list[str]) -> dict[str, list[str]]:
    """Group indented item lines under the numbered heading above them."""
    sections: dict[str, list[str]] = {}
    current = None
    for line in lines:
        if line[:2].rstrip(".").isdigit():
            current = line
            sections[current] = []
        elif current and line.startswith("  "):
            sections[current].append(line)
    return sections


def test_banner_frames_title(test_settings: Settings):
    lines = list(demonstration_lines(test_settings))

    assert lines[0] == "=" * 60
    assert lines[1] == "OOP CONCEPTS DEMONSTRATION"
    assert lines[2] == "=" * 60


def test_each_section_starts_with_blank_line_and_rule(test_settings: Settings):
    lines = list(demonstration_lines(test_settings))
    headings = [i for i, line in enumerate(lines) if line[:2].rstrip(".").isdigit()]

    assert len(headings) == 7
    for index in headings:
        assert lines[index - 1] == ""
        assert lines[index + 1] == "-" * 40


def test_section_contents(test_settings: Settings):
    sections = list(_sections(list(demonstration_lines(test_settings))).values())

    assert sections == [
        [
            "  Dog's age: 5",
            "  After birthday: 6",
            "  After invalid set (100): 6",
        ],
        [
            "  Rex speaks: Woof! I'm a GERMAN SHEPHERD",
            "  Whiskers speaks: Meow~ (comfortable purr)",
        ],
        [
            "  Rex says: Woof! I'm a GERMAN SHEPHERD",
            "  Whiskers says: Meow~ (comfortable purr)",
            "  Shadow says: MEOW! (street cat attitude)",
            "  Donald says: Quack quack!",
            "  Spirit says: Neigh!",
        ],
        [
            "  Sound: Woof! I'm a GERMAN SHEPHERD",
            "  Sound: Meow~ (comfortable purr)",
            "  Sound: Quack quack!",
        ],
        [
            "  Spirit walks on 4 legs",
            "  Spirit gallops at 35 mph!",
        ],
        [
            "  Quack quack!",
            "  Donald paddles gracefully across the pond",
        ],
        [
            "  Rex says: Woof! I'm a GERMAN SHEPHERD",
            "  Spirit says: Neigh!",
        ],
    ]


def test_key_takeaways_close_the_output(test_settings: Settings):
    lines = list(demonstration_lines(test_settings))
    tail = lines[-(len(KEY_TAKEAWAYS) + 5) :]

    assert tail == [
        "",
        "=" * 60,
        "KEY TAKEAWAYS:",
        "=" * 60,
        *KEY_TAKEAWAYS,
        "=" * 60,
    ]


def test_output_is_deterministic(test_settings: Settings):
    assert list(demonstration_lines(test_settings)) == list(
        demonstration_lines(test_settings)
    )


def test_rule_widths_and_title_follow_settings():
    config = Settings(
        _env_file=None, title="ZOO", banner_width=10, section_rule_width=5
    )
    lines = list(demonstration_lines(config))

    assert lines[:3] == ["=" * 10, "ZOO", "=" * 10]
    assert "-" * 5 in lines
    assert "-" * 40 not in lines


def test_run_demonstration_echoes_every_line(test_settings: Settings):
    written: list[str] = []

    count = run_demonstration(test_settings, echo=written.append)

    assert written == list(demonstration_lines(test_settings))
    assert count == len(written)


def test_run_demonstration_prints_to_stdout(test_settings: Settings, capsys):
    run_demonstration(test_settings)

    captured = capsys.readouterr()
    assert "  Spirit gallops at 35 mph!\n" in captured.out
    assert captured.err == ""
