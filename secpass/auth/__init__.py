# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""Password hashing core: salt, key derivation, artifact packing, comparison."""
