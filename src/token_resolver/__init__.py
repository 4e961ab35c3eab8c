from token_resolver.data_value import data_value_handler, default_resolver

__all__ = ["data_value_handler", "default_resolver"]
