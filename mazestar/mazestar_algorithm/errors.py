class InvalidConfigurationError(ValueError):
    """Kích thước lưới, kích thước ô hoặc điểm start/goal không hợp lệ"""
