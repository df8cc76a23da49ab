from salesreport.infra.storage.s3_store import ObjectStore, S3ObjectStore

__all__ = ["ObjectStore", "S3ObjectStore"]
