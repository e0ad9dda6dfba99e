
import pygame
from tetris_config import CONFIG

class Overlay:
    """F1 panel that edits CONFIG live; numeric items clamp, bools flip, choices cycle."""
    def __init__(self, config=CONFIG):
        self.config=config
        self.active=False
        self.items=[
            ("TICK_MS","Tick ms",100,1000,50),
            ("ROTATE_CW","Rotate clockwise",False,True,None),
            ("HARD_DROP_LOCKS","Hard drop locks",False,True,None),
            ("SPAWN_ROTATIONS","Random spawn turns",False,True,None),
            ("SCORE_MODE","Score per",("row","clear"),None,None),
            ("LINE_SCORE","Line score",10,1000,10),
        ]
        self.index=0

    def toggle(self): self.active=not self.active

    def handle(self,e):
        if e.key in (pygame.K_ESCAPE,pygame.K_F1): self.toggle(); return
        if e.key==pygame.K_UP: self.index=(self.index-1)%len(self.items); return
        if e.key==pygame.K_DOWN: self.index=(self.index+1)%len(self.items); return
        key,label,lo,hi,step=self.items[self.index]
        val=self.config[key]
        if isinstance(lo,tuple):
            if e.key in (pygame.K_RETURN,pygame.K_LEFT,pygame.K_RIGHT):
                d=-1 if e.key==pygame.K_LEFT else 1
                self.config[key]=lo[(lo.index(val)+d)%len(lo)]
        elif isinstance(lo,bool):
            if e.key in (pygame.K_RETURN,pygame.K_LEFT,pygame.K_RIGHT): self.config[key]=not val
        else:
            if e.key==pygame.K_LEFT: self.config[key]=max(lo,val-step)
            if e.key==pygame.K_RIGHT: self.config[key]=min(hi,val+step)

    def draw(self,screen,font,w,h):
        if not self.active: return
        s=pygame.Surface((w-80,h-80),pygame.SRCALPHA); s.fill((20,25,40,230))
        screen.blit(s,(40,40))
        screen.blit(font.render("CONFIG (F1/Esc to close)",True,(230,240,255)),(60,56))
        y=100
        for i,(key,label,lo,hi,step) in enumerate(self.items):
            col=(255,255,255) if i==self.index else (200,210,235)
            screen.blit(font.render(f"{label}: {self.config[key]}",True,col),(60,y)); y+=30
