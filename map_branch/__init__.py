"""
map_branch: create the interactive map feature branch and commit the
map component files with a prewritten message.
"""
