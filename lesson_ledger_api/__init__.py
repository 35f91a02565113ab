"""Lesson Ledger API: roster, lesson and payment bookkeeping for a tutoring business."""
