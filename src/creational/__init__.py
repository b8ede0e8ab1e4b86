# Copyright (c) Meta Platforms, Inc. and affiliates
"""
Creational pattern demos: builder, factory, prototype and singleton.
"""
