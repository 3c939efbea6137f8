# SPDX-License-Identifier: MIT


class EntityType:
    PROJECT = "project"
    SPRINT = "sprint"
    TASK = "task"
