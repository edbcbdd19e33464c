from tilegrid.engine.gridengine.engine import RECOMMENDED_MAX_SIZE, GridEngine

__all__ = ["RECOMMENDED_MAX_SIZE", "GridEngine"]
