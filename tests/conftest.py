from jsonpath_tester.testing import jsonpath_tester_config

__all__ = ["jsonpath_tester_config"]
