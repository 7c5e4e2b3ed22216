from azure.storage.blob.aio import BlobServiceClient, ContainerClient

from khet_mitra.core.config import settings

_service_client: BlobServiceClient | None = None
# Containers already checked or created by this process.
_ready_containers: set[str] = set()


def get_blob_service_client() -> BlobServiceClient:
    """
    Shared async BlobServiceClient built from the configured connection string.
    """
    global _service_client
    if _service_client is None:
        if not settings.AZURE_STORAGE_CONNECTION_STRING:
            raise ValueError(
                "AZURE_STORAGE_CONNECTION_STRING environment variable not set."
            )
        _service_client = BlobServiceClient.from_connection_string(
            settings.AZURE_STORAGE_CONNECTION_STRING
        )
    return _service_client


async def get_container_client(container_name: str) -> ContainerClient:
    """
    Returns a ContainerClient, creating the container on first use.
    """
    container_client = get_blob_service_client().get_container_client(container_name)
    if container_name not in _ready_containers:
        if not await container_client.exists():
            await container_client.create_container()
        _ready_containers.add(container_name)
    return container_client


async def close_blob_service_client() -> None:
    global _service_client
    if _service_client is not None:
        await _service_client.close()
    _service_client = None
    _ready_containers.clear()
