import sys

import pandas as pd

path = sys.argv[1] if len(sys.argv) > 1 else "survey_results.csv"
df = pd.read_csv(path)

# Which move the greedy search prefers, per player
move_share = df.groupby("Player")["Label"].value_counts(normalize=True)
print(move_share)

# Store gained by the chosen move
print(df.groupby("Player")["Best_Score"].describe())

# Search cost by number of candidate moves
print(df.groupby("Candidates")["Time_Seconds"].mean())

# Positions whose avalanche never settled
print(df[df["Error"].notna()][["Board", "Player", "Counts"]])
