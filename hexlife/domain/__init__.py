"""Domain layer: grid index, cell state, rules, fields, and patterns."""

from hexlife.domain.cell import CellState, Terrain
from hexlife.domain.field import Field
from hexlife.domain.grid import CellId, GridIndex, H3Grid
from hexlife.domain.patterns import PATTERN_SHAPES, Pattern, PatternLibrary
from hexlife.domain.rules import Rules, RuleTable, TerrainRules

__all__ = [
    "CellId",
    "CellState",
    "Field",
    "GridIndex",
    "H3Grid",
    "PATTERN_SHAPES",
    "Pattern",
    "PatternLibrary",
    "RuleTable",
    "Rules",
    "Terrain",
    "TerrainRules",
]
