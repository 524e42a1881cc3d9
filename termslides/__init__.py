"""termslides — present markdown slide decks in the terminal."""
