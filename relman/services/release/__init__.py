"""Release pipeline: validate, tag, archive, push, report."""
