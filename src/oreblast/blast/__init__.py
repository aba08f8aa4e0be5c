"""Blast engine — area damage over a Grid."""

from oreblast.blast.engine import apply_blast, blast_damage, falloff
from oreblast.blast.result import BlastHit, BlastResult

__all__ = ["BlastHit", "BlastResult", "apply_blast", "blast_damage", "falloff"]
