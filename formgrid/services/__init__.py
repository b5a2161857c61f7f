"""Services driving the layout reconstructor: collaborators, batch run, summary, progress."""
