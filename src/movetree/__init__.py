"""movetree — PGN move trees with path-addressed navigation.

Quick start::

    from movetree import GoToEnd, GoToNext, load_game, reduce

    state = load_game('[White "Alice"]\\n\\n1. e4 (1. d4 d5) e5 2. Nf3 *')
    state = reduce(state, GoToNext())
    print(state.position)
    state = reduce(state, GoToEnd())

The Qt session bridge lives in :mod:`movetree.ui` and is imported separately.
"""

from movetree.engine import STARTING_FEN, ChessEngine, IPositionEngine, MoveRecord
from movetree.errors import (
    IllegalMove,
    InvalidEdit,
    InvalidPosition,
    MoveTreeError,
    ParseError,
    PathNotFound,
)
from movetree.notation import (
    Header,
    Orientation,
    build_pgn,
    movetext_from_tree,
    parse_pgn,
    parse_pgn_games,
)
from movetree.settings import ExportSettings, ParserSettings
from movetree.tree import (
    Command,
    CommandType,
    DeleteMove,
    GoToBranchEnd,
    GoToBranchStart,
    GoToEnd,
    GoToNext,
    GoToPath,
    GoToPrevious,
    GoToStart,
    MakeMove,
    NextBranch,
    NextBranching,
    Node,
    Path,
    PreviousBranch,
    PreviousBranching,
    PromoteVariation,
    RenderView,
    SetAnnotation,
    SetComment,
    SetHeaders,
    SetOrientation,
    TreeState,
    end_path,
    go_to_path,
    load_game,
    next_path,
    node_at,
    previous_path,
    reduce,
    start_path,
)

__all__ = [
    # Engine
    "STARTING_FEN",
    "ChessEngine",
    "IPositionEngine",
    "MoveRecord",
    # Errors
    "IllegalMove",
    "InvalidEdit",
    "InvalidPosition",
    "MoveTreeError",
    "ParseError",
    "PathNotFound",
    # Notation
    "Header",
    "Orientation",
    "build_pgn",
    "movetext_from_tree",
    "parse_pgn",
    "parse_pgn_games",
    # Settings
    "ExportSettings",
    "ParserSettings",
    # Tree
    "Node",
    "Path",
    "RenderView",
    "TreeState",
    "load_game",
    "node_at",
    "next_path",
    "previous_path",
    "start_path",
    "end_path",
    "go_to_path",
    # Commands
    "Command",
    "CommandType",
    "DeleteMove",
    "GoToBranchEnd",
    "GoToBranchStart",
    "GoToEnd",
    "GoToNext",
    "GoToPath",
    "GoToPrevious",
    "GoToStart",
    "MakeMove",
    "NextBranch",
    "NextBranching",
    "PreviousBranch",
    "PreviousBranching",
    "PromoteVariation",
    "SetAnnotation",
    "SetComment",
    "SetHeaders",
    "SetOrientation",
    "reduce",
]
