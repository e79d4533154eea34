"""
True Size Overlay - Color Utilities

Rotating palette used to give each new overlay a distinct color.
"""

from constants import OVERLAY_COLORS


class ColorCycle:
	"""Hands out palette colors in order, wrapping around at the end."""

	def __init__(self, palette=None):
		self.palette = list(palette) if palette else list(OVERLAY_COLORS)
		self._index = 0

	def next_color(self):
		color = self.palette[self._index % len(self.palette)]
		self._index += 1
		return color

	def reset(self):
		"""Start again from the first palette color"""
		self._index = 0

