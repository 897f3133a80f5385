"""Sample dataset for demos and tests."""
import logging

SAMPLE_LINES = [
    "date,temperature,humidity,precipitation,windSpeed",
    "2023-01-01,5.5,80.0,2.1,12.3",
    "2023-01-02,4.8,85.0,0.0,8.7",
    "2023-01-03,3.2,90.0,5.6,15.2",
    "2023-02-01,6.7,75.0,0.0,10.5",
    "2023-02-02,8.1,65.0,0.0,9.3",
    "2023-03-01,12.3,60.0,1.2,8.7",
    "2023-03-15,15.6,55.0,0.0,12.8",
    "2023-04-01,18.2,50.0,0.5,14.3",
    "2023-05-01,22.7,45.0,0.0,11.2",
    "2023-06-01,26.5,40.0,0.0,9.8",
    "2023-07-01,32.3,35.0,0.0,7.5",
    "2023-07-15,31.8,38.0,0.0,8.2",
    "2023-08-01,30.5,42.0,1.8,10.3",
    "2023-09-01,25.3,55.0,2.5,12.8",
    "2023-10-01,19.8,65.0,3.2,14.5",
    "2023-11-01,12.5,75.0,4.7,16.3",
    "2023-12-01,7.2,85.0,3.1,18.7",
]


def create_sample_data(path: str) -> None:
    """Write the sample dataset (header plus 17 days of 2023) to ``path``."""
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(SAMPLE_LINES) + "\n")
    logging.info(f"Wrote {len(SAMPLE_LINES) - 1} sample observations to {path}")
