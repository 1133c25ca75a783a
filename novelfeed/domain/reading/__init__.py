"""Reading domain module: progress records and completion percentages."""
