from dataproc_client.client.base import BaseProcessingClient
from dataproc_client.client.example_client_adapter import ExampleClientAdapter
from dataproc_client.client.http_client_adapter import HttpClientAdapter
from dataproc_client.config.settings import Settings


class ProcessingClientFactory:
    """Creates the configured processing client adapter."""

    PROVIDERS = ("http", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseProcessingClient:
        provider = settings.processing_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "http":
            return HttpClientAdapter(
                base_url=settings.api_base_url,
                timeout_seconds=settings.request_timeout_seconds,
                process_path=settings.process_path,
            )
        raise ValueError(
            f"Unknown processing provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
