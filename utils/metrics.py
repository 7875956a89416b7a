"""Runtime measurement for per-image jobs."""

import time


class Timer:
    """Simple timer for load/encode runtime."""
    
    def __init__(self):
        self.load_time_ms = 0.0
        self.encode_time_ms = 0.0
    
    def measure_load(self, func, *args, **kwargs):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            self.load_time_ms = (time.perf_counter() - start) * 1000.0
    
    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            self.encode_time_ms = (time.perf_counter() - start) * 1000.0
