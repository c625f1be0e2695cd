"""Move tree layer — nodes, path navigation, snapshots and the reducer.

Quick start::

    from movetree.tree import GoToEnd, GoToNext, load_game, reduce

    state = load_game("1. e4 e5 (1... c5) 2. Nf3 *")
    state = reduce(state, GoToNext())
    state = reduce(state, GoToEnd())
    print(state.position)
"""

from movetree.tree.commands import (
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
    PreviousBranch,
    PreviousBranching,
    PromoteVariation,
    SetAnnotation,
    SetComment,
    SetHeaders,
    SetOrientation,
    command_for,
)
from movetree.tree.navigation import (
    branch_start_path,
    end_path,
    go_to_path,
    iter_line,
    mainline,
    mainline_path,
    next_branching_path,
    next_path,
    node_at,
    previous_branching_path,
    previous_path,
    sibling_path,
    start_path,
)
from movetree.tree.node import ROOT_PATH, Node, Path
from movetree.tree.reducer import reduce
from movetree.tree.state import RenderView, TreeState, load_game

__all__ = [
    # Model
    "Node",
    "Path",
    "ROOT_PATH",
    "RenderView",
    "TreeState",
    "load_game",
    # Navigation
    "branch_start_path",
    "end_path",
    "go_to_path",
    "iter_line",
    "mainline",
    "mainline_path",
    "next_branching_path",
    "next_path",
    "node_at",
    "previous_branching_path",
    "previous_path",
    "sibling_path",
    "start_path",
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
    "command_for",
    "reduce",
]
