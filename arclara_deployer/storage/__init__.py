from arclara_deployer.storage.record_store import RecordPersister
