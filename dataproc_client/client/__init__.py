from dataproc_client.client.base import BaseProcessingClient
from dataproc_client.client.factory import ProcessingClientFactory
from dataproc_client.client.http_client_adapter import HttpClientAdapter

__all__ = ["BaseProcessingClient", "HttpClientAdapter", "ProcessingClientFactory"]
