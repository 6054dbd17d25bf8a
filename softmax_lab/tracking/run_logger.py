"""
Run Logger - append-only JSONL records of demo runs
"""

import json
import uuid
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional


class RunLogger:
    """Writes one record per softmax evaluation of a run"""

    def __init__(self, log_dir: Path, run_id: Optional[str] = None):
        self.log_dir = Path(log_dir)
        self.run_id = run_id or uuid.uuid4().hex[:8]
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.run_file = self.log_dir / f"runs_{self.run_id}.jsonl"

    def log_samples(self, samples: List[float], extra: Optional[Dict] = None):
        """Record the drawn input vector"""
        record = {
            'timestamp': datetime.now().isoformat(),
            'run_id': self.run_id,
            'kind': 'samples',
            'samples': samples,
        }
        if extra:
            record.update(extra)
        self._append(record)

    def log_softmax(self, temperature: float, probs: List[float],
                    entropy: float, argmax: int,
                    extra: Optional[Dict] = None):
        """Record one temperature of the sweep"""
        record = {
            'timestamp': datetime.now().isoformat(),
            'run_id': self.run_id,
            'kind': 'softmax',
            'temperature': temperature,
            'probs': probs,
            'entropy': entropy,
            'argmax': argmax,
        }
        if extra:
            record.update(extra)
        self._append(record)

    def read_records(self) -> List[Dict]:
        if not self.run_file.exists():
            return []
        with open(self.run_file, 'r', encoding='utf-8') as f:
            return [json.loads(line) for line in f if line.strip()]

    def _append(self, record: Dict):
        # nan/inf from zero temperatures are written as NaN/Infinity tokens
        with open(self.run_file, 'a', encoding='utf-8') as f:
            f.write(json.dumps(record, default=str) + '\n')
