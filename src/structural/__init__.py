# Copyright (c) Meta Platforms, Inc. and affiliates
"""
Structural pattern demos: adapter, bridge and proxy.
"""
