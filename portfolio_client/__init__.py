from portfolio_client.api import ApiError, FetchResult, PortfolioClient
from portfolio_client.payloads import blog_post_payload, new_blog_post

__all__ = ["ApiError", "FetchResult", "PortfolioClient", "blog_post_payload", "new_blog_post"]
