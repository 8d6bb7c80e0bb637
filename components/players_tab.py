"""Player roster tab."""

import streamlit as st


def render_players_tab(actions):
    st.subheader("👥 Players")

    if actions.roster_locked:
        st.info("The player list is fixed in configuration and cannot be edited here.")
    else:
        with st.form("add_player", clear_on_submit=True):
            name = st.text_input("Player name", placeholder="Enter new player's name")
            if st.form_submit_button("Add Player") and name.strip():
                actions.add_player(name)
                st.rerun()

    players = actions.players
    if not players:
        st.caption("No players yet.")
        return

    for player in players:
        c1, c2 = st.columns([4, 1])
        c1.write(player.name)
        if not actions.roster_locked:
            c2.button(
                "🗑️",
                key=f"delplayer-{player.id}",
                help=f"Remove {player.name} from the roster and from every session",
                on_click=actions.delete_player,
                args=(player.id,),
            )
