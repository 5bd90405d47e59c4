from .hoop import HoopRecordSchema

__all__ = ["HoopRecordSchema"]
