"""
cartonsdk - locate, download and install SwiftWasm toolchains.
"""
