import pytest

from core.errors import RepositoryError
from core.gallery_service import GalleryRepository
from core.storage import LocalObjectStore, make_object_path
from conftest import BrokenStore


def test_object_path_shape():
    path = make_object_path("gallery", "Dining Room.PNG")
    prefix, name = path.split("/")
    assert prefix == "gallery"
    assert name.endswith(".png")
    assert len(name.split("-")[0]) == 12


def test_object_path_without_extension():
    assert make_object_path("menu", "photo").endswith(".bin")


def test_upload_records_row_and_file(repos, storage):
    image = repos.gallery.upload("room.jpg", b"data", "Dining room")
    assert image.title == "Dining room"
    assert (storage.root / image.storage_path).read_bytes() == b"data"
    assert image.image_url.endswith(image.storage_path)


def test_upload_title_defaults_to_filename(repos):
    assert repos.gallery.upload("patio.jpg", b"data", "").title == "patio.jpg"


def test_uploads_never_share_a_key(repos):
    first = repos.gallery.upload("same.jpg", b"1", "a")
    second = repos.gallery.upload("same.jpg", b"2", "b")
    assert first.storage_path != second.storage_path


def test_delete_removes_blob_and_row(repos, storage):
    image = repos.gallery.upload("room.jpg", b"data", "Dining room")
    repos.gallery.delete(image.id)
    assert not (storage.root / image.storage_path).exists()
    assert repos.gallery.count() == 0


def test_delete_keeps_going_when_storage_fails(session_factory):
    repo = GalleryRepository(session_factory, BrokenStore())
    image = repo.upload("room.jpg", b"data", "Dining room")
    repo.delete(image.id)
    assert repo.get(image.id) is None


def test_local_store_remove_missing_object(tmp_path):
    store = LocalObjectStore(tmp_path)
    with pytest.raises(RepositoryError, match="Object not found"):
        store.remove(["gallery/nope.jpg"])
