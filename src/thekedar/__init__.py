"""Labour Thekedar backend package.

Organised by feature modules (auth, projects, labours, work_days, payments)
with a thin Flask controller layer over service and repository layers.
"""
