import os
import pytest
import mongomock

# Keep the real database out of tests
os.environ.setdefault("MONGODB_URI", "")
os.environ.setdefault("MONGO_DB", "eventhub_test")
os.environ.setdefault("FLASK_ENV", "testing")

from eventhub import create_app  # noqa: E402
from eventhub.db.mongo import MongoStore  # noqa: E402
from eventhub.errors import UploadError  # noqa: E402

TEST_DB = "eventhub_test"


class FakeUploader:
    def __init__(self):
        self.calls = []
        self.fail = False

    def upload(self, data, filename="upload"):
        self.calls.append({"data": data, "filename": filename})
        if self.fail:
            raise UploadError("Image upload failed: 500 error")
        return f"https://res.cloudinary.com/demo/image/upload/EventHub/{filename}"


@pytest.fixture()
def mock_client():
    client = mongomock.MongoClient()
    yield client
    client.drop_database(TEST_DB)


@pytest.fixture()
def store(mock_client):
    s = MongoStore(
        uri="mongodb://localhost:27017",
        db_name=TEST_DB,
        client_factory=lambda uri, **kwargs: mock_client,
    )
    s.ensure_indexes()
    return s


@pytest.fixture()
def db(store):
    return store.db


@pytest.fixture()
def uploader():
    return FakeUploader()


@pytest.fixture()
def app(store, uploader):
    flask_app = create_app(store=store, uploader=uploader)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def app_client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture()
def event_data():
    return {
        "title": "React Conf 2024!",
        "description": "The official React conference.",
        "overview": "Two days of talks on React and its ecosystem.",
        "image": "https://res.cloudinary.com/demo/image/upload/EventHub/react.png",
        "venue": "Henderson Convention Center",
        "location": "Las Vegas, NV",
        "date": "Oct 15, 2024",
        "time": " 9:00 AM - 6:00 PM ",
        "mode": "hybrid",
        "audience": "Frontend developers",
        "agenda": ["Keynote", "React Compiler deep dive", "Q&A"],
        "organizer": "Meta Open Source",
        "tags": ["react", "javascript"],
    }


@pytest.fixture
def fake_cloudinary(monkeypatch):
    calls = []

    def install(mapper):
        def _upload(file, **options):
            calls.append({"file": file, "options": options})
            return mapper(file, options)

        monkeypatch.setattr("cloudinary.uploader.upload", _upload, raising=True)
        return calls

    return install
