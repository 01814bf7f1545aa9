"""Generate a sample classroom roster for demos and manual testing."""

import pandas as pd
import os


def generate_classrooms_df() -> pd.DataFrame:
    """Three floors of a teaching block, a few rooms each."""
    rows = [
        {"Room ID": "G01",  "Capacity": 40, "Floor No": 0, "Near Washroom": "Yes"},
        {"Room ID": "G02",  "Capacity": 30, "Floor No": 0, "Near Washroom": "No"},
        {"Room ID": "A101", "Capacity": 60, "Floor No": 1, "Near Washroom": "Yes"},
        {"Room ID": "A102", "Capacity": 40, "Floor No": 1, "Near Washroom": "No"},
        {"Room ID": "A103", "Capacity": 50, "Floor No": 1, "Near Washroom": "No"},
        {"Room ID": "B201", "Capacity": 80, "Floor No": 2, "Near Washroom": "Yes"},
        {"Room ID": "B202", "Capacity": 45, "Floor No": 2, "Near Washroom": "No"},
        {"Room ID": "C301", "Capacity": 120, "Floor No": 3, "Near Washroom": "No"},
    ]
    return pd.DataFrame(rows)


def generate_sample_csv(output_dir: str):
    os.makedirs(output_dir, exist_ok=True)
    generate_classrooms_df().to_csv(os.path.join(output_dir, "classrooms.csv"), index=False)


def generate_sample_excel(output_dir: str):
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "classrooms.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_classrooms_df().to_excel(writer, sheet_name="Classrooms", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csv(out)
    generate_sample_excel(out)
    print("Sample classroom roster generated in sample_files/")
