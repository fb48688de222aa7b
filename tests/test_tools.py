"""
Tests for MCP tools.

Tests the MCP tool implementations for spelling, the catalog,
and MIDI export.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_spelling.catalog import CatalogLoader
from chuk_mcp_spelling.tools import (
    register_catalog_tools,
    register_export_tools,
    register_spelling_tools,
)


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
def spelling_tools():
    return register_spelling_tools(MockMCPServer("test"))


@pytest.fixture
def catalog_tools(catalog: CatalogLoader):
    return register_catalog_tools(MockMCPServer("test"), catalog)


@pytest.fixture
def export_tools(catalog: CatalogLoader, temp_dir: Path):
    return register_export_tools(MockMCPServer("test"), catalog, temp_dir / "output")


class TestRegistration:
    """Tools register under their function names."""

    def test_registered_names(self, catalog: CatalogLoader, temp_dir: Path):
        mcp = MockMCPServer("test")
        register_spelling_tools(mcp)
        register_catalog_tools(mcp, catalog)
        register_export_tools(mcp, catalog, temp_dir)

        assert set(mcp.tools) == {
            "music_spell_pitch",
            "music_add_interval",
            "music_subtract_interval",
            "music_enharmonic",
            "music_pitch_from_height",
            "music_invert_interval",
            "music_list_collections",
            "music_build_chord",
            "music_build_scale",
            "music_chord_inversion",
            "music_formula_table",
            "music_export_midi",
        }


class TestSpellingTools:
    """Tests for spelling tools."""

    @pytest.mark.asyncio
    async def test_spell_pitch(self, spelling_tools):
        """Spell a sharp and report its alternate."""
        data = json.loads(await spelling_tools["music_spell_pitch"](name="C#4"))
        assert data["status"] == "success"
        assert data["pitch"]["height"] == 61
        assert data["pitch"]["name"] == "C#4"
        assert data["enharmonic"]["spelling"] == "Db"
        assert data["name_with_enharmonics"] == "C#/Db"

    @pytest.mark.asyncio
    async def test_spell_pitch_default_octave(self, spelling_tools):
        data = json.loads(await spelling_tools["music_spell_pitch"](name="A"))
        assert data["pitch"]["octave"] == 4
        assert data["pitch"]["height"] == 69
        assert data["enharmonic"] is None

    @pytest.mark.asyncio
    async def test_spell_pitch_invalid(self, spelling_tools):
        data = json.loads(await spelling_tools["music_spell_pitch"](name="H4"))
        assert data["status"] == "error"
        assert "H4" in data["message"]

    @pytest.mark.asyncio
    async def test_add_interval(self, spelling_tools):
        """C4 + m3 is Eb4."""
        data = json.loads(await spelling_tools["music_add_interval"](root="C4", interval="m3"))
        assert data["status"] == "success"
        assert data["interval"] == "m3"
        assert data["result"]["name"] == "Eb"
        assert data["result"]["height"] == 63

    @pytest.mark.asyncio
    async def test_add_degree_label(self, spelling_tools):
        data = json.loads(await spelling_tools["music_add_interval"](root="C4", interval="#11"))
        assert data["interval"] == "A11"
        assert data["result"]["pitch"] == "F#5"

    @pytest.mark.asyncio
    async def test_add_invalid_interval(self, spelling_tools):
        data = json.loads(await spelling_tools["music_add_interval"](root="C4", interval="P3"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_subtract_compound(self, spelling_tools):
        """D5 - M9 is C4."""
        result = await spelling_tools["music_subtract_interval"](root="D5", interval="M9")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["result"]["pitch"] == "C4"
        assert data["result"]["height"] == 60

    @pytest.mark.asyncio
    async def test_enharmonic(self, spelling_tools):
        data = json.loads(await spelling_tools["music_enharmonic"](name="B#4"))
        assert data["enharmonic"]["pitch"] == "C5"
        assert data["enharmonic"]["height"] == data["pitch"]["height"]

    @pytest.mark.asyncio
    async def test_enharmonic_natural(self, spelling_tools):
        data = json.loads(await spelling_tools["music_enharmonic"](name="C4"))
        assert data["status"] == "success"
        assert data["enharmonic"] is None

    @pytest.mark.asyncio
    async def test_pitch_from_height(self, spelling_tools):
        data = json.loads(await spelling_tools["music_pitch_from_height"](height=61))
        assert data["pitch"]["name"] == "C#/Db"
        assert data["pitch"]["octave"] == 4

    @pytest.mark.asyncio
    async def test_invert_interval(self, spelling_tools):
        data = json.loads(await spelling_tools["music_invert_interval"](interval="M9"))
        assert data["interval"]["compound"] is True
        assert data["inversion"]["symbol"] == "m7"
        assert data["inversion"]["semitones"] == 10

    @pytest.mark.asyncio
    async def test_invert_invalid(self, spelling_tools):
        data = json.loads(await spelling_tools["music_invert_interval"](interval="Q9"))
        assert data["status"] == "error"


class TestCatalogTools:
    """Tests for catalog tools."""

    @pytest.mark.asyncio
    async def test_list_collections(self, catalog_tools):
        data = json.loads(await catalog_tools["music_list_collections"]())
        assert data["status"] == "success"
        assert data["count"] == 35

    @pytest.mark.asyncio
    async def test_list_scales(self, catalog_tools):
        data = json.loads(await catalog_tools["music_list_collections"](kind="scale"))
        assert data["count"] == 13
        assert all(c["kind"] == "scale" for c in data["collections"])

    @pytest.mark.asyncio
    async def test_list_bad_kind(self, catalog_tools):
        data = json.loads(await catalog_tools["music_list_collections"](kind="mode"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_build_chord(self, catalog_tools):
        data = json.loads(await catalog_tools["music_build_chord"](symbol="C7"))
        assert data["status"] == "success"
        assert data["chord"]["notes"] == ["C", "E", "G", "Bb"]
        assert data["chord"]["heights"] == [60, 64, 67, 70]
        assert data["chord"]["formula"] == ["1", "3", "5", "b7"]

    @pytest.mark.asyncio
    async def test_build_slash_chord(self, catalog_tools):
        data = json.loads(await catalog_tools["music_build_chord"](symbol="C/F#"))
        assert data["chord"]["pitches"] == ["F#3", "C4", "E4", "G4"]

    @pytest.mark.asyncio
    async def test_build_chord_unknown_suffix(self, catalog_tools):
        data = json.loads(await catalog_tools["music_build_chord"](symbol="Cnope"))
        assert data["status"] == "error"
        assert data["message"] == "No chord found for suffix 'nope'."

    @pytest.mark.asyncio
    async def test_build_scale(self, catalog_tools):
        data = json.loads(await catalog_tools["music_build_scale"](root="Eb4", scale="minor"))
        assert data["status"] == "success"
        assert data["scale"]["name"] == "Natural Minor"
        assert data["scale"]["notes"] == ["Eb", "F", "Gb", "Ab", "Bb", "Cb", "Db"]

    @pytest.mark.asyncio
    async def test_build_scale_unknown(self, catalog_tools):
        data = json.loads(await catalog_tools["music_build_scale"](root="C", scale="7"))
        assert data["status"] == "error"
        assert "scale" in data["message"]

    @pytest.mark.asyncio
    async def test_chord_inversion(self, catalog_tools):
        result = await catalog_tools["music_chord_inversion"](symbol="C", inversion=1)
        data = json.loads(result)
        assert data["pitches"] == ["E4", "G4", "C5"]
        assert data["heights"] == [64, 67, 72]

    @pytest.mark.asyncio
    async def test_chord_inversion_out_of_range(self, catalog_tools):
        result = await catalog_tools["music_chord_inversion"](symbol="C", inversion=3)
        data = json.loads(result)
        assert data["status"] == "error"
        assert "3-note" in data["message"]

    @pytest.mark.asyncio
    async def test_formula_table(self, catalog_tools):
        result = await catalog_tools["music_formula_table"](root="C", kind="chord")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["rows"] == 22
        assert "| Dominant Seventh | C7, Cdom7 | C(1) - E(3) - G(5) - Bb(b7) |" in data["table"]

    @pytest.mark.asyncio
    async def test_formula_table_html(self, catalog_tools):
        result = await catalog_tools["music_formula_table"](root="D", kind="scale", fmt="html")
        data = json.loads(result)
        assert data["format"] == "html"
        assert data["table"].startswith("<table>")

    @pytest.mark.asyncio
    async def test_formula_table_bad_format(self, catalog_tools):
        result = await catalog_tools["music_formula_table"](fmt="csv")
        assert json.loads(result)["status"] == "error"


class TestExportTools:
    """Tests for export tools."""

    @pytest.mark.asyncio
    async def test_export_midi(self, export_tools, temp_dir: Path):
        data = json.loads(await export_tools["music_export_midi"](symbol="C7"))
        assert data["status"] == "success"
        assert Path(data["path"]) == temp_dir / "output" / "C7.mid"
        assert Path(data["path"]).exists()
        assert data["heights"] == [60, 64, 67, 70]

    @pytest.mark.asyncio
    async def test_export_slash_chord_filename(self, export_tools):
        data = json.loads(
            await export_tools["music_export_midi"](symbol="C#m/G#", mode="arpeggio")
        )
        assert data["status"] == "success"
        assert Path(data["path"]).name == "Csm_over_Gs.mid"

    @pytest.mark.asyncio
    async def test_export_custom_name(self, export_tools):
        result = await export_tools["music_export_midi"](symbol="Am", output_name="my_chord")
        data = json.loads(result)
        assert Path(data["path"]).name == "my_chord.mid"

    @pytest.mark.asyncio
    async def test_export_bad_mode(self, export_tools):
        data = json.loads(await export_tools["music_export_midi"](symbol="C", mode="strum"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_export_out_of_range(self, export_tools):
        result = await export_tools["music_export_midi"](symbol="C", octave=10)
        data = json.loads(result)
        assert data["status"] == "error"
        assert "MIDI range" in data["message"]
