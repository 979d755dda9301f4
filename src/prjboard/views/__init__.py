"""View layer — mountable components built on :class:`ViewComponent`."""
