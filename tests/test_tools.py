"""
Tests for MCP tools.

Tests the MCP tool implementations for theory catalogs, voicing placement,
and the quiz trainers.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_fretboard.constants import ChordTrainerMode
from chuk_mcp_fretboard.models import (
    ChordTrainerSettings,
    NoteTrainerSettings,
    TheoryTrainerSettings,
)
from chuk_mcp_fretboard.presets import PresetLoader


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def theory_tools():
    from chuk_mcp_fretboard.tools.theory import register_theory_tools

    return register_theory_tools(MockMCPServer("test"))


@pytest.fixture
def voicing_tools():
    from chuk_mcp_fretboard.tools.voicing import register_voicing_tools

    return register_voicing_tools(MockMCPServer("test"))


@pytest.fixture
def quiz_tools(library_path: Path, temp_dir: Path):
    from chuk_mcp_fretboard.tools.quiz import register_quiz_tools

    loader = PresetLoader(library_path=library_path, project_path=temp_dir)
    return register_quiz_tools(MockMCPServer("test"), loader)


class TestRegistration:
    """Tests for tool registration."""

    def test_registers_on_server(self, library_path: Path):
        """Tools are registered on the server under their function names."""
        from chuk_mcp_fretboard.tools import (
            register_quiz_tools,
            register_theory_tools,
            register_voicing_tools,
        )

        mcp = MockMCPServer("test")
        register_theory_tools(mcp)
        register_voicing_tools(mcp)
        register_quiz_tools(mcp, PresetLoader(library_path=library_path))

        assert "fretboard_find_voicing" in mcp.tools
        assert "fretboard_chord_question" in mcp.tools
        assert "fretboard_theory_question" in mcp.tools
        assert "fretboard_list_intervals" in mcp.tools
        assert all(name.startswith("fretboard_") for name in mcp.tools)


class TestTheoryTools:
    """Tests for theory tools."""

    @pytest.mark.asyncio
    async def test_list_chord_qualities(self, theory_tools):
        data = json.loads(await theory_tools["fretboard_list_chord_qualities"]())
        assert data["status"] == "success"
        minor = next(q for q in data["qualities"] if q["key"] == "minor")
        assert minor["intervals"] == ["P1", "m3", "P5"]

    @pytest.mark.asyncio
    async def test_build_chord(self, theory_tools):
        data = json.loads(await theory_tools["fretboard_build_chord"](root="G", quality="dominant7"))
        assert data["status"] == "success"
        assert data["chord"]["name"] == "G7"
        assert data["chord"]["notes"] == ["G", "B", "D", "F"]

    @pytest.mark.asyncio
    async def test_build_chord_unknown_quality(self, theory_tools):
        data = json.loads(await theory_tools["fretboard_build_chord"](root="G", quality="power"))
        assert data["status"] == "error"
        assert "power" in data["message"]

    @pytest.mark.asyncio
    async def test_build_chord_flat_root(self, theory_tools):
        data = json.loads(await theory_tools["fretboard_build_chord"](root="Eb", quality="major"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_voicing_order(self, theory_tools):
        data = json.loads(
            await theory_tools["fretboard_voicing_order"](
                root="C", quality="major7", voicing="drop_2"
            )
        )
        assert data["outcome"] == "found"
        assert data["notes"] == ["G", "C", "E", "B"]
        assert data["string_count"] == 4

    @pytest.mark.asyncio
    async def test_voicing_order_not_applicable(self, theory_tools):
        data = json.loads(
            await theory_tools["fretboard_voicing_order"](
                root="G", quality="dominant7", voicing="first_inversion"
            )
        )
        assert data["status"] == "success"
        assert data["outcome"] == "not_applicable"

    @pytest.mark.asyncio
    async def test_interval_between(self, theory_tools):
        data = json.loads(await theory_tools["fretboard_interval_between"](note_a="C", note_b="G"))
        assert data["interval"]["short_name"] == "P5"
        assert data["interval"]["semitones"] == 7

    @pytest.mark.asyncio
    async def test_list_intervals(self, theory_tools):
        data = json.loads(await theory_tools["fretboard_list_intervals"]())
        assert len(data["intervals"]) == 13

    @pytest.mark.asyncio
    async def test_scales(self, theory_tools):
        listed = json.loads(await theory_tools["fretboard_list_scales"]())
        assert any(s["key"] == "blues" for s in listed["scales"])

        data = json.loads(
            await theory_tools["fretboard_scale_notes"](root="a", scale="minorPentatonic")
        )
        assert data["root"] == "A"
        assert data["notes"] == ["A", "C", "D", "E", "G"]


class TestVoicingTools:
    """Tests for voicing tools."""

    @pytest.mark.asyncio
    async def test_find_voicing(self, voicing_tools):
        data = json.loads(
            await voicing_tools["fretboard_find_voicing"](
                root="A", quality="minor", voicing="root", strings=[3, 4, 5]
            )
        )
        assert data["status"] == "success"
        assert data["outcome"] == "found"
        assert data["chord"] == "Am"
        assert data["target_order"] == ["A", "C", "E"]
        assert [(p["string"], p["fret"]) for p in data["positions"]] == [(3, 2), (4, 3), (5, 5)]
        root = next(p for p in data["positions"] if p["label"] == "A")
        assert root["color"] == "root"

    @pytest.mark.asyncio
    async def test_find_voicing_string_set(self, voicing_tools):
        data = json.loads(
            await voicing_tools["fretboard_find_voicing"](
                root="G", quality="dominant7", voicing="drop_2", string_set="5432"
            )
        )
        assert data["strings"] == [1, 2, 3, 4]
        assert [(p["string"], p["fret"]) for p in data["positions"]] == [
            (1, 6),
            (2, 4),
            (3, 5),
            (4, 5),
        ]

    @pytest.mark.asyncio
    async def test_find_voicing_not_applicable(self, voicing_tools):
        data = json.loads(
            await voicing_tools["fretboard_find_voicing"](
                root="A", quality="minor", voicing="root", strings=[2, 3, 4, 5]
            )
        )
        assert data["status"] == "success"
        assert data["outcome"] == "not_applicable"
        assert data["positions"] == []

    @pytest.mark.asyncio
    async def test_find_voicing_no_solution(self, voicing_tools):
        data = json.loads(
            await voicing_tools["fretboard_find_voicing"](
                root="A", quality="minor", voicing="root", strings=[3, 4, 5], max_fret=4
            )
        )
        assert data["outcome"] == "no_solution"

    @pytest.mark.asyncio
    async def test_find_voicing_drop_d(self, voicing_tools):
        data = json.loads(
            await voicing_tools["fretboard_find_voicing"](
                root="D", quality="major", voicing="root", strings=[3, 4, 5], tuning="drop_d"
            )
        )
        assert {"string": 5, "fret": 0, "label": "D", "color": "root"} in data["positions"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"strings": [3, 4, 9]},
            {"strings": [3, 3, 4]},
            {"string_set": "987"},
            {},
            {"strings": [3, 4, 5], "tuning": "open_g"},
            {"strings": [3, 4, 5], "voicing": "drop_9"},
        ],
    )
    async def test_find_voicing_invalid_input(self, voicing_tools, kwargs):
        data = json.loads(
            await voicing_tools["fretboard_find_voicing"](root="A", quality="minor", **kwargs)
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_list_string_sets(self, voicing_tools):
        data = json.loads(await voicing_tools["fretboard_list_string_sets"]())
        assert data["string_sets"]["543"] == [2, 3, 4]

    @pytest.mark.asyncio
    async def test_scale_positions(self, voicing_tools):
        data = json.loads(
            await voicing_tools["fretboard_scale_positions"](
                root="E", scale="minorPentatonic", max_fret=3
            )
        )
        assert data["status"] == "success"
        assert data["count"] == len(data["positions"])
        assert all(p["fret"] <= 3 for p in data["positions"])


class TestQuizTools:
    """Tests for quiz tools."""

    @pytest.mark.asyncio
    async def test_list_presets(self, quiz_tools):
        data = json.loads(await quiz_tools["fretboard_list_presets"]())
        assert data["status"] == "success"
        trainers = {p["name"]: p["trainer"] for p in data["presets"]}
        assert trainers["open-triads"] == "chord"
        assert trainers["natural-notes"] == "note"

    @pytest.mark.asyncio
    async def test_chord_question_round_trip(self, quiz_tools):
        """A generated question can be answered with its own answer."""
        data = json.loads(
            await quiz_tools["fretboard_chord_question"](preset="open-triads", seed=7)
        )
        assert data["status"] == "success"
        question = data["question"]
        assert question["mode"] == "identify"
        assert question["correct_name"] in question["answer_options"]

        result = json.loads(
            await quiz_tools["fretboard_check_chord_answer"](
                question=question, choice=question["correct_name"]
            )
        )
        assert result["result"]["correct"] is True

    @pytest.mark.asyncio
    async def test_chord_question_build_mode(self, quiz_tools):
        data = json.loads(
            await quiz_tools["fretboard_chord_question"](preset="open-triads", mode="build", seed=3)
        )
        question = data["question"]
        assert question["answer_options"] is None

        selected = [{"string": n["string"], "fret": n["fret"]} for n in question["target_notes"]]
        result = json.loads(
            await quiz_tools["fretboard_check_chord_answer"](question=question, selected=selected)
        )
        assert result["result"]["correct"] is True

    @pytest.mark.asyncio
    async def test_chord_question_seeded(self, quiz_tools):
        first = await quiz_tools["fretboard_chord_question"](seed=11)
        second = await quiz_tools["fretboard_chord_question"](seed=11)
        assert first == second

    @pytest.mark.asyncio
    async def test_missing_preset(self, quiz_tools):
        data = json.loads(await quiz_tools["fretboard_chord_question"](preset="nope"))
        assert data["status"] == "error"
        assert "nope" in data["message"]

    @pytest.mark.asyncio
    async def test_wrong_trainer_preset(self, quiz_tools):
        data = json.loads(await quiz_tools["fretboard_chord_question"](preset="natural-notes"))
        assert data["status"] == "error"
        assert "note trainer" in data["message"]

    @pytest.mark.asyncio
    async def test_invalid_mode(self, quiz_tools):
        data = json.loads(await quiz_tools["fretboard_chord_question"](mode="sing"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_project_preset(self, quiz_tools, temp_dir: Path):
        (temp_dir / "a-minor.yaml").write_text(
            "name: a-minor\n"
            "trainer: chord\n"
            "settings:\n"
            "  roots: [A]\n"
            "  qualities: [minor]\n"
            "  voicings: [root]\n"
            '  string_sets: ["654"]\n'
        )
        data = json.loads(await quiz_tools["fretboard_chord_question"](preset="a-minor"))
        assert data["question"]["correct_name"] == "Am on Str 654"

    @pytest.mark.asyncio
    async def test_interval_identify_round_trip(self, quiz_tools):
        data = json.loads(
            await quiz_tools["fretboard_interval_question"](preset="interval-basics", seed=5)
        )
        question = data["question"]
        assert question["mode"] == "identify"
        assert question["interval_note"] is not None

        result = json.loads(
            await quiz_tools["fretboard_check_interval_answer"](
                question=question, choice=question["interval"]
            )
        )
        assert result["result"]["correct"] is True

    @pytest.mark.asyncio
    async def test_interval_find_constraint(self, quiz_tools):
        """Clicks off the root's string are rejected under same_string."""
        data = json.loads(
            await quiz_tools["fretboard_interval_question"](
                mode="find", constraint="same_string", seed=2
            )
        )
        question = data["question"]
        other_string = (question["root"]["string"] + 1) % 6

        result = json.loads(
            await quiz_tools["fretboard_check_interval_answer"](
                question=question, clicked={"string": other_string, "fret": 0}
            )
        )
        assert result["result"]["counted"] is False
        assert result["result"]["correct"] is False

    @pytest.mark.asyncio
    async def test_note_round_trip(self, quiz_tools):
        data = json.loads(await quiz_tools["fretboard_note_question"](preset="natural-notes", seed=9))
        question = data["question"]
        assert question["position"]["string"] in (3, 4, 5)
        assert "#" not in question["correct_note"]

        result = json.loads(
            await quiz_tools["fretboard_check_note_answer"](
                question=question, choice=question["correct_note"].lower()
            )
        )
        assert result["result"]["correct"] is True

    @pytest.mark.asyncio
    async def test_note_find_outside_area(self, quiz_tools):
        data = json.loads(
            await quiz_tools["fretboard_note_question"](preset="natural-notes", mode="find")
        )
        result = json.loads(
            await quiz_tools["fretboard_check_note_answer"](
                question=data["question"],
                clicked={"string": 0, "fret": 0},
                preset="natural-notes",
            )
        )
        assert result["result"]["counted"] is False

    @pytest.mark.asyncio
    async def test_chord_build_off_string_set(self, quiz_tools):
        """Build answers on strings outside the question's set are not graded."""
        data = json.loads(
            await quiz_tools["fretboard_chord_question"](preset="open-triads", mode="build", seed=3)
        )
        question = data["question"]
        selected = [{"string": n["string"], "fret": n["fret"]} for n in question["target_notes"]]
        used = {p["string"] for p in selected}
        selected[0] = {"string": next(s for s in range(6) if s not in used), "fret": 0}

        result = json.loads(
            await quiz_tools["fretboard_check_chord_answer"](question=question, selected=selected)
        )
        assert result["result"]["counted"] is False
        assert question["string_set"] in result["result"]["feedback"]

    @pytest.mark.asyncio
    async def test_theory_round_trip(self, quiz_tools):
        data = json.loads(
            await quiz_tools["fretboard_theory_question"](preset="seventh-symbols", seed=4)
        )
        assert data["status"] == "success"
        question = data["question"]
        assert question["quality"] in {
            "major7",
            "minor7",
            "dominant7",
            "minor7flat5",
            "diminished7",
        }
        assert question["chord_symbol"] == "C" + question["symbol"]
        assert len(question["answer_options"]) == 4

        result = json.loads(
            await quiz_tools["fretboard_check_theory_answer"](
                question=question, choice=question["correct_answer"]
            )
        )
        assert result["result"]["correct"] is True

    @pytest.mark.asyncio
    async def test_theory_wrong_answer(self, quiz_tools):
        data = json.loads(await quiz_tools["fretboard_theory_question"](seed=1))
        question = data["question"]
        wrong = next(o for o in question["answer_options"] if o != question["correct_answer"])

        result = json.loads(
            await quiz_tools["fretboard_check_theory_answer"](question=question, choice=wrong)
        )
        assert result["result"]["correct"] is False
        assert question["correct_answer"] in result["result"]["feedback"]

    @pytest.mark.asyncio
    async def test_theory_wrong_trainer_preset(self, quiz_tools):
        data = json.loads(await quiz_tools["fretboard_theory_question"](preset="open-triads"))
        assert data["status"] == "error"
        assert "chord trainer" in data["message"]


class TestResolveSettings:
    """Tests for preset and override resolution."""

    def test_returns_requested_model(self, library_path: Path):
        from chuk_mcp_fretboard.tools.quiz import resolve_settings

        loader = PresetLoader(library_path=library_path)
        settings = resolve_settings(loader, ChordTrainerSettings, "open-triads", {"mode": "build"})
        assert type(settings) is ChordTrainerSettings
        assert settings.mode == ChordTrainerMode.BUILD
        assert settings.qualities == ["major", "minor"]

    def test_defaults_without_preset(self, library_path: Path):
        from chuk_mcp_fretboard.tools.quiz import resolve_settings

        loader = PresetLoader(library_path=library_path)
        assert resolve_settings(loader, TheoryTrainerSettings) == TheoryTrainerSettings()

    def test_none_overrides_ignored(self, library_path: Path):
        from chuk_mcp_fretboard.tools.quiz import resolve_settings

        loader = PresetLoader(library_path=library_path)
        settings = resolve_settings(loader, NoteTrainerSettings, "natural-notes", {"mode": None})
        assert settings.naturals_only is True

    def test_wrong_trainer(self, library_path: Path):
        from chuk_mcp_fretboard.tools.quiz import resolve_settings

        loader = PresetLoader(library_path=library_path)
        with pytest.raises(ValueError, match="interval trainer"):
            resolve_settings(loader, NoteTrainerSettings, "interval-basics")
