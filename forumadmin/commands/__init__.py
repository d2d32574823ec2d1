"""Operations offered by the admin menu."""
