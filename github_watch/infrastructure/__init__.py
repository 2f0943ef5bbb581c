from .github import GitHubFingerprintFetcher, create_client

__all__ = ["GitHubFingerprintFetcher", "create_client"]
