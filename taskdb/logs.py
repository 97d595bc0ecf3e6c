import json, time, uuid, datetime as dt
import logging
from typing import Optional, Dict, Any

oplog = logging.getLogger("taskdb.oplog")


class LogContext:
    """One operation-log record per mutation, emitted as a JSON line."""

    def __init__(self, action: str):
        self.action = action
        self.request_id = str(uuid.uuid4())
        self.start = time.perf_counter()
        self.before = None
        self.after = None
        self.payload = None
        self.entity_type = None
        self.entity_id = None

    def set_entity(self, etype: str, eid):
        self.entity_type = etype
        self.entity_id = None if eid is None else str(eid)

    def set_before(self, obj): self.before = obj
    def set_after(self, obj): self.after = obj
    def set_payload(self, obj): self.payload = obj

    def write(self, result: str = "OK", err: Optional[str] = None) -> Dict[str, Any]:
        elapsed_ms = int((time.perf_counter() - self.start) * 1000)
        rec = {
            "ts": dt.datetime.now(dt.timezone.utc).isoformat(),
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "request_id": self.request_id,
            "before": self.before,
            "after": self.after,
            "payload": self.payload,
            "result": result,
            "err_msg": err,
            "latency_ms": elapsed_ms,
        }
        level = logging.INFO if result == "OK" else logging.WARNING
        oplog.log(level, json.dumps(rec, ensure_ascii=False, default=str))
        return rec
