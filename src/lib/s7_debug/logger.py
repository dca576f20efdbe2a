"""Logger structuré pour le debug."""

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Any

from src.config import PATHS


@dataclass
class PassLog:
    """Log d'une passe sur la grille."""
    round: int
    timestamp: str
    duration: float
    strategy: str
    board_changes: int
    reveal_count: int
    flag_count: int
    unrevealed_left: int
    metadata: Dict[str, Any]


@dataclass
class ActionLog:
    """Log d'une action."""
    timestamp: str
    coord: tuple
    action_type: str
    strategy: str
    rule: Optional[str] = None


class DebugLogger:
    """Logger structuré pour le debug (fichiers JSON lines par session)."""

    def __init__(self, log_dir: str = PATHS['logs']):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.passes: List[PassLog] = []
        self.actions: List[ActionLog] = []

    def log_pass(
        self,
        round: int,
        duration: float,
        strategy: str,
        board_changes: int,
        reveal_count: int = 0,
        flag_count: int = 0,
        unrevealed_left: int = 0,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log une passe."""
        log = PassLog(
            round=round,
            timestamp=datetime.now().isoformat(),
            duration=duration,
            strategy=strategy,
            board_changes=board_changes,
            reveal_count=reveal_count,
            flag_count=flag_count,
            unrevealed_left=unrevealed_left,
            metadata=metadata or {},
        )
        self.passes.append(log)
        self._write_log("passes", asdict(log))

    def log_action(
        self,
        coord: tuple,
        action_type: str,
        strategy: str,
        rule: Optional[str] = None,
    ) -> None:
        """Log une action."""
        log = ActionLog(
            timestamp=datetime.now().isoformat(),
            coord=coord,
            action_type=action_type,
            strategy=strategy,
            rule=rule,
        )
        self.actions.append(log)
        self._write_log("actions", asdict(log))

    def save_session(self, final_board: Optional[List[str]] = None) -> str:
        """Sauvegarde la session complète."""
        session_file = self.log_dir / f"session_{self.session_id}.json"
        data = {
            "session_id": self.session_id,
            "total_passes": len(self.passes),
            "total_actions": len(self.actions),
            "passes": [asdict(p) for p in self.passes],
            "actions": [asdict(a) for a in self.actions],
            "final_board": final_board,
        }
        with open(session_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return str(session_file)

    def get_summary(self) -> Dict[str, Any]:
        """Retourne un résumé de la session."""
        return {
            "session_id": self.session_id,
            "passes": len(self.passes),
            "total_actions": len(self.actions),
            "reveal_actions": sum(1 for a in self.actions if a.action_type == "REVEAL"),
            "flag_actions": sum(1 for a in self.actions if a.action_type == "FLAG"),
            "pivot_actions": sum(1 for a in self.actions if a.strategy == "PIVOT"),
            "total_duration": sum(p.duration for p in self.passes),
        }

    def _write_log(self, log_type: str, data: Dict[str, Any]) -> None:
        """Écrit un log dans un fichier."""
        log_file = self.log_dir / f"{log_type}_{self.session_id}.jsonl"
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(data, ensure_ascii=False) + "\n")
