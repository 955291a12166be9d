from config import PRETAGGER_API_HOST, PRETAGGER_API_SCHEME, STORAGE_ROOT
from storage.local_store import LocalBlobStore
from utils.pretagging.PreTaggerClient import PreTaggerClient


def get_blob_store():
    return LocalBlobStore(STORAGE_ROOT)


def get_pretagger_client():
    return PreTaggerClient(PRETAGGER_API_HOST, scheme=PRETAGGER_API_SCHEME)
