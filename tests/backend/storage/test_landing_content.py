import json

from backend.storage.kv_store import InMemoryStore, JsonFileStore
from backend.storage.landing_content import DEFAULT_CONTENT, STORAGE_KEY, LandingPageContentStore


class _FailingStore:
    def get(self, key):
        raise OSError('disk unavailable')

    def set(self, key, value):
        raise OSError('disk unavailable')


def test_get_initializes_storage_with_default() -> None:
    store = InMemoryStore()

    content = LandingPageContentStore(store).get()

    assert content == DEFAULT_CONTENT
    assert json.loads(store.get(STORAGE_KEY)) == DEFAULT_CONTENT


def test_saved_content_reads_back_identically_until_reset() -> None:
    store = InMemoryStore()
    content_store = LandingPageContentStore(store)
    edited = content_store.get()
    edited['home']['title'] = 'Where Little Ones'
    edited['gallery']['images'] = edited['gallery']['images'][:1]

    content_store.save(edited)
    saved_raw = store.get(STORAGE_KEY)

    assert content_store.get() == edited
    assert store.get(STORAGE_KEY) == saved_raw

    content_store.reset()

    assert content_store.get() == DEFAULT_CONTENT


def test_mutating_returned_default_does_not_change_builtin_default() -> None:
    content = LandingPageContentStore(InMemoryStore()).get()
    content['contact']['phone'] = '000'

    assert DEFAULT_CONTENT['contact']['phone'] == '+917654637472'


def test_corrupt_document_falls_back_to_default() -> None:
    store = InMemoryStore({STORAGE_KEY: '{not json'})

    content = LandingPageContentStore(store).get()

    assert content == DEFAULT_CONTENT
    assert json.loads(store.get(STORAGE_KEY)) == DEFAULT_CONTENT


def test_storage_failures_are_swallowed() -> None:
    content_store = LandingPageContentStore(_FailingStore())

    content_store.save({'home': {}})
    content_store.reset()

    assert content_store.get() == DEFAULT_CONTENT


def test_json_file_store_persists_between_instances(tmp_path) -> None:
    path = tmp_path / 'content.json'
    LandingPageContentStore(JsonFileStore(path)).save({'home': {'title': 'Saved'}})

    assert LandingPageContentStore(JsonFileStore(path)).get() == {'home': {'title': 'Saved'}}


def test_json_file_store_recovers_from_corrupt_file(tmp_path) -> None:
    path = tmp_path / 'content.json'
    path.write_text('{not json', encoding='utf-8')
    content_store = LandingPageContentStore(JsonFileStore(path))

    assert content_store.get() == DEFAULT_CONTENT
    assert json.loads(json.loads(path.read_text(encoding='utf-8'))[STORAGE_KEY]) == DEFAULT_CONTENT

    content_store.save({'home': {'title': 'edited'}})

    assert content_store.get() == {'home': {'title': 'edited'}}


def test_json_file_store_set_replaces_corrupt_file(tmp_path) -> None:
    path = tmp_path / 'content.json'
    path.write_text('[1, 2', encoding='utf-8')
    store = JsonFileStore(path)

    store.set('admitCardAccess', '[]')

    assert store.get('admitCardAccess') == '[]'
