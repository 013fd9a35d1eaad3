"""Application configuration loaded from environment variables."""

import os
from dataclasses import dataclass

DEFAULT_ORG_ID = "c1556e17-b7c0-45a3-a6ae-9546248fb17a"


@dataclass(frozen=True)
class AppConfig:
    """Centralized application configuration.

    Every field has a default so the service runs against seeded sample data
    out of the box. Selecting the ``blob`` data source additionally requires
    a storage connection string.
    """

    # Data source selection
    data_source: str = "sample"
    storage_connection_string: str = ""
    folders_container: str = "org-folders"
    folders_blob: str = "snapshot/folders.json"

    # Sample dataset
    default_org_id: str = DEFAULT_ORG_ID
    sample_size: int = 1000
    sample_seed: int = 2022

    # Paging limits for the HTTP surface
    default_page_size: int = 10
    max_page_size: int = 100


def load_config() -> AppConfig:
    """Construct an AppConfig from environment variables.

    Optional environment variables (with defaults):
        OF_DATA_SOURCE: Folder data source, ``sample`` or ``blob`` (default: sample).
        AzureWebJobsStorage: Azure Storage connection string for the blob source.
        OF_FOLDERS_CONTAINER: Blob container holding the folder snapshot.
        OF_FOLDERS_BLOB: Blob path of the folder snapshot JSON file.
        OF_DEFAULT_ORG_ID: Organization used when a request names none, and
            the owner of two thirds of the sample data.
        OF_SAMPLE_SIZE: Number of generated sample folders (default: 1000).
        OF_SAMPLE_SEED: Random seed for sample data (default: 2022).
        OF_DEFAULT_PAGE_SIZE: Page size when a request names none (default: 10).
        OF_MAX_PAGE_SIZE: Largest page size a request may ask for (default: 100).

    Returns:
        Configured AppConfig instance.

    Raises:
        ValueError: If a numeric variable is not an integer.
    """
    return AppConfig(
        data_source=os.environ.get("OF_DATA_SOURCE", "sample"),
        storage_connection_string=os.environ.get("AzureWebJobsStorage", ""),  # noqa: SIM112
        folders_container=os.environ.get("OF_FOLDERS_CONTAINER", "org-folders"),
        folders_blob=os.environ.get("OF_FOLDERS_BLOB", "snapshot/folders.json"),
        default_org_id=os.environ.get("OF_DEFAULT_ORG_ID", DEFAULT_ORG_ID),
        sample_size=int(os.environ.get("OF_SAMPLE_SIZE", "1000")),
        sample_seed=int(os.environ.get("OF_SAMPLE_SEED", "2022")),
        default_page_size=int(os.environ.get("OF_DEFAULT_PAGE_SIZE", "10")),
        max_page_size=int(os.environ.get("OF_MAX_PAGE_SIZE", "100")),
    )
