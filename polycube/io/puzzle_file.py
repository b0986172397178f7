"""JSON persistence for puzzles.

A puzzle file wraps one :class:`Puzzle` with authoring metadata. Timestamps are
UTC ISO strings; ``modified`` is refreshed every time the file is serialised.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.exceptions import PuzzleError, PuzzleFileError
from ..core.models import Piece, Problem
from ..engine.puzzle import Puzzle
from ..grids.registry import grid_from_jsonable, grid_to_jsonable
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

FORMAT_VERSION = 1


@dataclass
class PuzzleMetadata:
    id: str
    name: str
    author: str
    description: str
    created: str
    modified: str


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _to_json_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_to_json_value(v) for v in value]
    return value


def _from_json_value(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_from_json_value(v) for v in value)
    return value


def _require_object(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise PuzzleFileError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


class PuzzleFile:
    """A puzzle together with its name, author and timestamps."""

    def __init__(
        self,
        puzzle: Puzzle,
        name: str,
        author: str = "",
        description: str = "",
        id: Optional[str] = None,
    ) -> None:
        self.id = id or uuid.uuid4().hex
        self.puzzle = puzzle
        self.name = name
        self.author = author
        self.description = description
        self.created = _utc_now()
        self.modified = self.created

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    def get_metadata(self) -> PuzzleMetadata:
        return PuzzleMetadata(
            id=self.id,
            name=self.name,
            author=self.author,
            description=self.description,
            created=self.created,
            modified=self.modified,
        )

    def serialize(self) -> str:
        self.modified = _utc_now()
        doc = {
            "format_version": FORMAT_VERSION,
            **asdict(self.get_metadata()),
            "puzzle": self._serialize_puzzle(self.puzzle),
        }
        return json.dumps(doc, ensure_ascii=False, indent=2)

    @classmethod
    def deserialize(cls, data: str) -> "PuzzleFile":
        try:
            doc = json.loads(data)
        except json.JSONDecodeError as exc:
            raise PuzzleFileError(f"Puzzle file is not valid JSON: {exc}") from exc
        if not isinstance(doc, dict):
            raise PuzzleFileError("Puzzle file must contain a JSON object")

        try:
            puzzle = cls._deserialize_puzzle(doc["puzzle"])
            puzzle_file = cls(
                puzzle,
                name=doc["name"],
                author=doc.get("author", ""),
                description=doc.get("description", ""),
                id=doc["id"],
            )
        except KeyError as exc:
            raise PuzzleFileError(f"Puzzle file is missing field: {exc}") from exc
        puzzle_file.created = doc.get("created", puzzle_file.created)
        puzzle_file.modified = doc.get("modified", puzzle_file.created)
        return puzzle_file

    def save(self, path: Path | str) -> Path:
        path = Path(path)
        path.write_text(self.serialize(), encoding="utf-8")
        LOGGER.info("Puzzle file saved: %s (%d pieces)", path, len(self.puzzle.pieces))
        return path

    @classmethod
    def load(cls, path: Path | str) -> "PuzzleFile":
        path = Path(path)
        puzzle_file = cls.deserialize(path.read_text(encoding="utf-8"))
        LOGGER.info("Puzzle file loaded: %s (%s)", path, puzzle_file.name)
        return puzzle_file

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _serialize_puzzle(puzzle: Puzzle) -> Dict[str, Any]:
        return {
            "id": puzzle.id,
            "grid": grid_to_jsonable(puzzle.grid),
            "pieces": [
                {
                    "id": piece.id,
                    "label": piece.label,
                    "color": piece.color,
                    "bounds": _to_json_value(piece.bounds),
                    "coordinates": _to_json_value(piece.coordinates),
                }
                for piece in puzzle.pieces.values()
            ],
            "problems": [
                {
                    "id": problem.id,
                    "label": problem.label,
                    "used_pieces": dict(problem.used_pieces),
                    "goal_piece_id": problem.goal_piece_id,
                }
                for problem in puzzle.problems.values()
            ],
        }

    @staticmethod
    def _deserialize_puzzle(data: Any) -> Puzzle:
        data = _require_object(data, "Puzzle entry")
        puzzle = Puzzle(data["id"], grid_from_jsonable(data["grid"]))
        pieces: List[Dict[str, Any]] = data.get("pieces") or []
        problems: List[Dict[str, Any]] = data.get("problems") or []
        try:
            for entry in pieces:
                entry = _require_object(entry, "Piece entry")
                puzzle.add_piece(
                    Piece(
                        id=entry["id"],
                        bounds=_from_json_value(entry.get("bounds")),
                        coordinates=entry.get("coordinates") or [],
                        label=entry.get("label"),
                        color=entry.get("color") or puzzle.get_new_piece_color(),
                    )
                )
            for entry in problems:
                entry = _require_object(entry, "Problem entry")
                puzzle.add_problem(
                    Problem(
                        id=entry["id"],
                        label=entry.get("label"),
                        used_pieces={k: int(v) for k, v in (entry.get("used_pieces") or {}).items()},
                        goal_piece_id=entry.get("goal_piece_id"),
                    )
                )
        except PuzzleFileError:
            raise
        except PuzzleError as exc:
            raise PuzzleFileError(f"Puzzle file is inconsistent: {exc}") from exc
        except (AttributeError, TypeError, ValueError) as exc:
            raise PuzzleFileError(f"Puzzle file has a malformed entry: {exc}") from exc
        return puzzle
