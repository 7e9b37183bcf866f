from __future__ import annotations

from application.generator.renderer_registry import RendererRegistry
from application.generator.renderers import BatchletRenderer, ChunkRenderer
from application.generator.xml_writer import XmlLineWriter, escape_attr, format_value
from domain.steps import BatchletStep, PartitionedChunkStep


def test_escape_attr_replaces_markup_characters() -> None:
    assert escape_attr('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"


def test_format_value_writes_lowercase_booleans() -> None:
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(5) == "5"


def test_writer_indents_by_two_spaces_and_skips_none_attributes() -> None:
    writer = XmlLineWriter()

    writer.open("outer", [("id", "o"), ("skip", None)])
    writer.empty("inner", [("flag", True)])
    writer.close("outer")

    assert writer.text() == '<outer id="o">\n  <inner flag="true"/>\n</outer>\n'
    assert writer.depth == 0


def test_registry_picks_first_supporting_renderer() -> None:
    batchlet = BatchletRenderer()
    chunk = ChunkRenderer()
    registry = RendererRegistry([batchlet, chunk])

    assert registry.get_renderer(BatchletStep(name="s")) is batchlet
    assert registry.get_renderer(PartitionedChunkStep(name="s")) is chunk


def test_escape_attr_keeps_whitespace_as_character_references() -> None:
    assert escape_attr("a\nb\rc\td") == "a&#10;b&#13;c&#9;d"
