"""Sub-package set aside for the Horizon HTTP API; it holds no modules yet."""