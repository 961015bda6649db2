"""Shared sample records with deliberately inconsistent headers."""


def sample_records():
    return [
        {
            "ID": "1",
            "Status": "Open",
            "Priority": "Urgent",
            "Tracker": "Bug",
            "State": "CA",
            "Subject": "Login fails",
            "Created": "1/1/2024",
            "Closed On": "",
        },
        {
            "id": 2,
            "status": "Closed",
            "priority": "High",
            "Type": "Feature",
            "state": "NY",
            "created_on": "1/1/2024",
            "closed_on": "1/3/2024",
        },
        {
            "ID": "3",
            "Status ": "Open",
            "Priority ": "Normal",
            "Issue tracker": "Bug",
            "States": "CA",
            "Created": "1/1/2024",
            "Closed On": "1/5/2024",
        },
        {"ID": "4", "Priority": "High"},
    ]
