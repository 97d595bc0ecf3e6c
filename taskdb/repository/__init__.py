"""Repository layer: DB access helpers (SQLite).

Keep functions thin and focused, so services avoid SQL strings.
Repositories never commit; the caller decides when a mutation is durable.
"""
from __future__ import annotations
