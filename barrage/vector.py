"""Small vector helpers on playfield positions."""

import math

import pygame


def distance(p0, p1):
    return math.hypot(p0[0] - p1[0], p0[1] - p1[1])


def heading_to_vector(heading):
    return pygame.Vector2(math.cos(heading), math.sin(heading))


def wrap_position(pos, width, height):
    return pygame.Vector2(pos.x % width, pos.y % height)


def clamp_position(pos, width, height):
    return pygame.Vector2(max(0.0, min(width, pos.x)), max(0.0, min(height, pos.y)))


def is_outside(pos, width, height, margin=0.0):
    return pos.x < -margin or pos.x > width + margin or pos.y < -margin or pos.y > height + margin
