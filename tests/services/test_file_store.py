import pytest

from chat_gateway.api.models.chat import FileDescriptor
from chat_gateway.models.services.files import FileStore, process_files


@pytest.fixture
def store():
    return FileStore()


class TestFileStore:

    def test_register_and_get(self, store):
        record = store.register("notes.txt", b"hello", type="text/plain")

        assert store.get(record.file_id) is record
        assert record.size == 5
        assert record.usage == 0
        assert "content" not in record.to_dict()

    def test_explicit_file_id(self, store):
        record = store.register("a.png", b"", type="image/png", file_id="file-1", width=10, height=20)
        assert store.get("file-1").width == 10

    def test_update_usage(self, store):
        record = store.register("notes.txt", b"hello")

        assert store.update_usage(record.file_id).usage == 1
        assert store.update_usage("missing") is None

    def test_delete_and_stats(self, store):
        record = store.register("notes.txt", b"hello")
        store.register("more.txt", b"abc")

        assert store.get_stats() == {"file_count": 2, "total_bytes": 8}
        assert store.delete(record.file_id) is True
        assert store.delete(record.file_id) is False


class TestProcessFiles:

    @pytest.mark.anyio
    async def test_dedupes_and_skips_unknown(self, store):
        """
        Test: Each distinct attachment is resolved once
        How: Reference one file twice plus an unregistered id
        Ensures: Usage counts once per request and unknown ids are dropped
        """
        record = store.register("notes.txt", b"hello", file_id="f1")

        records = await process_files(store, [{"file_id": "f1"}, {"file_id": "f1"}, {"file_id": "nope"}, {}])

        assert records == [record]
        assert record.usage == 1

    @pytest.mark.anyio
    async def test_accepts_descriptor_models(self, store):
        store.register("a.txt", b"a", file_id="f1")
        store.register("b.txt", b"b", file_id="f2")

        records = await process_files(store, [FileDescriptor(file_id="f2"), FileDescriptor(file_id="f1")])

        assert [r.file_id for r in records] == ["f2", "f1"]
